"""Shared objects for the API: settings, statement builder and bundled plays."""
from ..config.settings import get_settings
from ..data.catalog import load_plays
from ..engine import StatementBuilder

settings = get_settings()
builder = StatementBuilder(currency=settings.currency)
plays = load_plays(settings=settings)
