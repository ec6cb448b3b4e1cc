from dataclasses import dataclass


@dataclass
class ChunkingConfig:
    chunk_size: int = 512
    chunk_overlap: int = 50
