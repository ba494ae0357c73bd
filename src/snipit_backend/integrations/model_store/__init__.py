"""Installed model enumeration integration."""

from snipit_backend.integrations.model_store.abc import ModelStore
from snipit_backend.integrations.model_store.fake import FakeModelStore

__all__ = ["FakeModelStore", "ModelStore"]
