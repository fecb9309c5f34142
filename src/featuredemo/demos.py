# src/featuredemo/demos.py
"""
The demonstration routines.

Each routine builds a small value, prints it, and returns. ``run_all`` runs
the default sequence in order.
"""

import logging
from typing import Callable, Dict, Optional

from .api import build_request, fetch
from .config import DemoConfig
from .enums import ExampleError
from .mapping import compact_map_values as _compact_map_values, parse_int
from .models import Area, User, try_messages
from .multiples import is_multiple
from .raw_strings import raw
from .resources import read_resource
from .result import Result

logger = logging.getLogger(__name__)


def configure_logging(config: DemoConfig):
    """Set the package log level from ``config.verbose``."""
    package_logger = logging.getLogger("featuredemo")
    if config.verbose:
        package_logger.setLevel(logging.INFO)
    else:
        package_logger.setLevel(logging.WARNING)


def handling_error(error: ExampleError) -> str:
    """Print and return a label for ``error``.

    The final branch catches members added to ExampleError later on; today
    it is reached by C_ERROR.
    """
    if error is ExampleError.A_ERROR:
        label = "aError"
    elif error is ExampleError.B_ERROR:
        label = "bError"
    else:
        label = "default"
    print(label)
    return label


def raw_string(config: Optional[DemoConfig] = None):
    """Literals where quotes, '#' and backslashes need no escaping."""
    print(raw('#""Company Newsletter" has been delivered!!"#'))
    print(raw('##"#CompanyNewsletter"##'))

    one = 1
    # Backslash stays literal without the matching '#'
    print(raw(r'#"Only \(one)!!"#', one=one))
    print(raw(r'#"Only \#(one)!!"#', one=one))

    print(raw(r'#"\\[A-Z]+[A-Za-z]+\.[a-z]+"#'))


def compact_map_values(config: Optional[DemoConfig] = None):
    access = {
        "walk": "60",
        "train": "20",
        "car": "unknown",
    }
    known_access_times = _compact_map_values(access, parse_int)
    print("knownAccessTimes", known_access_times)


def compact_map_values_exclude_none(config: Optional[DemoConfig] = None):
    ages = {
        "a": 20,
        "b": 21,
        "c": None,
    }
    known_ages = _compact_map_values(ages)
    print("knownAges", known_ages)


def check_multiples(config: Optional[DemoConfig] = None):
    config = config or DemoConfig()
    int_value = config.multiple_value
    for divisor in config.divisors:
        if is_multiple(int_value, divisor):
            print(f"intValue is a multiple of {divisor}")


def output_area_info(config: Optional[DemoConfig] = None):
    area = Area(code=100, name="Gotanda")
    print(area)
    print(f"{area}")


def call_user_messages(config: Optional[DemoConfig] = None):
    user = User.create(1)
    if user is not None:
        user.id = 0

    messages = try_messages(user)
    print("messages", messages or "")


def call_fetch(config: Optional[DemoConfig] = None):
    config = config or DemoConfig()
    request = build_request(config.request_url)

    def completion(result: Result):
        if result.is_success:
            print("count", result.value)
        else:
            print("APIError", result.error.value)

    fetch(request, completion, success_count=config.success_count)


def result_example(config: Optional[DemoConfig] = None):
    config = config or DemoConfig()
    result = read_resource(config.resource_name, config.resource_type)
    if result.is_success:
        print("text", result.value)
    else:
        print("error", result.error)


# Default sequence, in run order
ROUTINES: Dict[str, Callable[[Optional[DemoConfig]], None]] = {
    "compact_map_values": compact_map_values,
    "compact_map_values_exclude_none": compact_map_values_exclude_none,
    "raw_string": raw_string,
    "check_multiples": check_multiples,
    "output_area_info": output_area_info,
    "call_user_messages": call_user_messages,
    "call_fetch": call_fetch,
    "result_example": result_example,
}


def _handling_error_routine(config: Optional[DemoConfig] = None):
    for error in ExampleError:
        handling_error(error)


# Routines reachable by name but not part of the default sequence
EXTRA_ROUTINES: Dict[str, Callable[[Optional[DemoConfig]], None]] = {
    "handling_error": _handling_error_routine,
}


def run(names, config: Optional[DemoConfig] = None):
    """Run the named routines in the given order."""
    config = config or DemoConfig()
    configure_logging(config)
    available = {**ROUTINES, **EXTRA_ROUTINES}
    for name in names:
        logger.info("Running %s", name)
        available[name](config)


def run_all(config: Optional[DemoConfig] = None):
    run(list(ROUTINES), config)
