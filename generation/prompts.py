DEFAULT_SYSTEM_PROMPT = (
    "You are a careful RAG assistant. Answer only from the provided context; "
    "if the context is not sufficient, answer \"I don't know\"."
)


USER_PROMPT_TEMPLATE = """Context:
{context}

Question:
{question}

Answer:"""


UNKNOWN_ANSWER = "I don't know"
