import pydantic
from pydantic import AnyUrl, TypeAdapter

ALLOWED_SCHEMES = ('http', 'https', 'ftp')
MAX_URL_LENGTH = 2083

_url_adapter = TypeAdapter(AnyUrl)


def _has_public_host(host: str) -> bool:
    # Bare names such as "localhost" or "not-a-url" carry no top-level domain.
    if host.startswith('[') or ':' in host:
        return True
    return '.' in host.strip('.')


def is_valid_url(value) -> bool:
    """Check URL syntax. A scheme is optional, a dotted host is not."""
    if not isinstance(value, str) or not value or len(value) >= MAX_URL_LENGTH:
        return False
    if any(ch.isspace() for ch in value):
        return False

    candidate = value if '://' in value else f'http://{value}'
    try:
        url = _url_adapter.validate_python(candidate)
    except pydantic.ValidationError:
        return False

    if url.scheme not in ALLOWED_SCHEMES:
        return False
    return bool(url.host) and _has_public_host(url.host)


def is_non_empty_string(value) -> bool:
    return isinstance(value, str) and value != ''
