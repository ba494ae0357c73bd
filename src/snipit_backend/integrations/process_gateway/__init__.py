"""Process command gateway integration."""

from snipit_backend.integrations.process_gateway.abc import ProcessGateway
from snipit_backend.integrations.process_gateway.fake import FakeProcessGateway

__all__ = ["FakeProcessGateway", "ProcessGateway"]
