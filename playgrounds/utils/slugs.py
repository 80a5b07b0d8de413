import secrets

# URL-safe alphabet, 64 symbols.
SLUG_ALPHABET = "useandom-26T198340PX75pxJACKVERYMINDBUSHWOLF_GQZbfghjklqvwyzrict"
SLUG_LENGTH = 21
LEGACY_ID_LENGTH = 12


def generate_token(length: int) -> str:
    return "".join(secrets.choice(SLUG_ALPHABET) for _ in range(length))


def generate_slug() -> str:
    """Public-facing playground identifier."""
    return generate_token(SLUG_LENGTH)


def generate_legacy_id() -> str:
    return generate_token(LEGACY_ID_LENGTH)
