"""Interface for presenting results to the user.

Allows different UI implementations (console, test doubles) behind the
command handler.
"""

import abc
from typing import Any, Sequence

from custsvc.domain.models.customer import Customer


class UserInterface(abc.ABC):
    """Abstract Base Class for user interaction."""

    @abc.abstractmethod
    def display_customers(self, customers: Sequence[Customer], **kwargs: Any) -> None:
        """Displays a list of customers.

        Args:
            customers: The customers to render.
            **kwargs: Additional formatting arguments (e.g., title).
        """
        pass

    @abc.abstractmethod
    def display_info(self, info_message: str, **kwargs: Any) -> None:
        """Displays an informational message."""
        pass

    @abc.abstractmethod
    def display_warning(self, warning_message: str, **kwargs: Any) -> None:
        """Displays a warning message."""
        pass

    @abc.abstractmethod
    def display_error(self, error_message: str, **kwargs: Any) -> None:
        """Displays an error message."""
        pass
