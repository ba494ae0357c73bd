"""Path opener integration."""

from snipit_backend.integrations.path_opener.abc import PathOpener
from snipit_backend.integrations.path_opener.fake import FakePathOpener

__all__ = ["FakePathOpener", "PathOpener"]
