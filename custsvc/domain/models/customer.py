"""Domain model for customers.

The service layer treats a Customer as an opaque value; only the repositories
and the console display look at its fields.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from custsvc.domain.models.common import CustomerID


@dataclass(frozen=True)
class Customer:
    """Entity representing a single customer."""
    customer_id: CustomerID
    name: str
    email: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Customer":
        """Builds a Customer from a plain mapping (e.g., a parsed YAML record).

        Raises:
            KeyError: If 'customer_id' or 'name' is missing.
        """
        email = data.get("email")
        return cls(
            customer_id=CustomerID(str(data["customer_id"])),
            name=str(data["name"]),
            email=str(email) if email is not None else None,
        )
