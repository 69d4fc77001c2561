from datetime import datetime, timezone


def utc_now() -> datetime:
    """Timezone-aware UTC timestamp used for every model default."""
    return datetime.now(timezone.utc)
