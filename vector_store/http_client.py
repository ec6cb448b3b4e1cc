from typing import Optional
from urllib import request
from urllib.error import HTTPError, URLError


def send(
    url: str,
    method: str = "GET",
    body: Optional[str] = None,
    timeout: int = 30,
) -> tuple[int, str]:
    """Send a text request and return ``(status, body)``.

    HTTP error statuses are returned, not raised, so callers can treat
    404 as "absent". Unreachable hosts raise ConnectionError.
    """
    data = body.encode("utf-8") if body is not None else None
    req = request.Request(
        url,
        data=data,
        headers={"Content-Type": "application/json; charset=utf-8"},
        method=method,
    )
    try:
        with request.urlopen(req, timeout=timeout) as resp:
            return resp.status, resp.read().decode("utf-8")
    except HTTPError as exc:
        text = exc.read().decode("utf-8") if exc.fp else ""
        return exc.code, text
    except URLError as exc:
        raise ConnectionError(f"Cannot reach {url}: {exc.reason}") from exc
