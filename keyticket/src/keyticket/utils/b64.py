import base64


def b64e(data: bytes) -> str:
    """URL-safe base64 encode without padding"""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def b64d(value: str) -> bytes:
    """URL-safe base64 decode that tolerates missing padding"""
    value = value.strip()
    pad = "=" * (-len(value) % 4)
    return base64.urlsafe_b64decode((value + pad).encode("ascii"))


def ticket_to_text(ticket: bytes) -> str:
    return b64e(ticket)


def ticket_from_text(text: str) -> bytes:
    return b64d(text)
