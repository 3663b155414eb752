"""Custom structural lint checks for envconfig.

Run everything with ``python -m linting.run``; each rule module is also
runnable on its own (``python -m linting.structure.file_length``).

Package layout
--------------
shared.py           Path constants, policy loading, parsing and reporting.
policy.toml         Centralised thresholds and path configuration.
run.py              Runs every rule and aggregates the exit code.

structure/          Code-shape rules for envconfig/
    file_length.py              Source files must not exceed the code-line limit.
    function_order.py           Private functions must precede public ones.
    one_class_per_file.py       One non-dataclass class per source file.

modules/            Config-module purity rules
    no_config_functions.py      envconfig/config/ must be purely declarative.

testing/            Test file placement and naming rules
    no_test_file_prefix.py      Test filenames must not use the test_ prefix.
    unit_test_domain_folders.py Unit tests must live in domain subfolders.
"""
