"""Run every structural lint rule and aggregate the exit code."""

from __future__ import annotations

import sys

from linting.modules import no_config_functions
from linting.testing import no_test_file_prefix, unit_test_domain_folders
from linting.structure import file_length, function_order, one_class_per_file

RULES = (
    file_length,
    function_order,
    one_class_per_file,
    no_config_functions,
    no_test_file_prefix,
    unit_test_domain_folders,
)


def main() -> int:
    return max(rule.main() for rule in RULES)


if __name__ == "__main__":
    sys.exit(main())
