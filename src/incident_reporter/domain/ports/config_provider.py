"""Port: where the report layout comes from."""

from abc import ABC, abstractmethod
from typing import Any


class ConfigProviderPort(ABC):
    """Supplies the active report layout.

    Typed as ``Any`` so the domain does not depend on the config package.
    """

    @abstractmethod
    def get_config(self) -> Any:
        """Return the active ``ReportLayout``."""
        ...
