"""Console implementation of the UserInterface using rich."""

import logging
from typing import Any, Optional, Sequence

from rich.box import ROUNDED
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from custsvc.domain.interfaces.user_interface import UserInterface
from custsvc.domain.models.customer import Customer

logger = logging.getLogger(__name__)


class ConsoleDisplay(UserInterface):
    """Concrete implementation of UserInterface using the rich library for console output."""

    def __init__(self, console: Optional[Console] = None):
        """Initializes the rich Console."""
        self._console = console or Console()

    def display_customers(self, customers: Sequence[Customer], **kwargs: Any) -> None:
        """Renders customers as a table, or a notice when there are none.

        Args:
            customers: The customers to render.
            **kwargs: Additional arguments including:
                - title: Table title (default: "Customers")
        """
        title = kwargs.get("title", "Customers")
        if not customers:
            self._console.print(f"[dim]{escape(title)}: no customers found.[/dim]")
            return

        table = Table(title=title, box=ROUNDED, show_lines=False)
        table.add_column("ID", style="cyan", no_wrap=True)
        table.add_column("Name", style="bold")
        table.add_column("Email", style="green")
        for customer in customers:
            table.add_row(escape(str(customer.customer_id)), escape(customer.name), escape(customer.email or "-"))
        self._console.print(table)
        logger.debug(f"Displayed {len(customers)} customers.")

    def display_info(self, info_message: str, **kwargs: Any) -> None:
        self._console.print(f"[blue]{escape(info_message)}[/blue]")

    def display_warning(self, warning_message: str, **kwargs: Any) -> None:
        self._console.print(f"[yellow]Warning:[/yellow] {escape(warning_message)}")

    def display_error(self, error_message: str, **kwargs: Any) -> None:
        self._console.print(f"[bold red]Error:[/bold red] {escape(error_message)}")
