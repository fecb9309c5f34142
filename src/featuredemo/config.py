# src/featuredemo/config.py
"""
Configuration for the demonstration routines.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class DemoConfig:
    """Settings shared by every demo routine."""
    verbose: bool = False  # Enable INFO logging
    request_url: str = "https://example.com"
    resource_name: str = "test"
    resource_type: str = "pdf"  # Not bundled, so result_example reports a failure
    multiple_value: int = 4
    divisors: Tuple[int, ...] = (2, 3)
    success_count: int = 1  # Payload of a successful fetch

    @property
    def resource_file(self) -> str:
        return f"{self.resource_name}.{self.resource_type}"
