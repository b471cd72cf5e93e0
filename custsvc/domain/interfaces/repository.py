"""Interface for customer data sources.

The authoritative (uncached) provider of customer data.
"""

import abc
from typing import List

from custsvc.domain.models.customer import Customer


class CustomerRepository(abc.ABC):
    """Abstract Base Class for retrieving customers."""

    @abc.abstractmethod
    def get_customers(self) -> List[Customer]:
        """Returns all customers, in data-source order.

        Raises:
            RepositoryError: If the data source cannot be read.
        """
        pass
