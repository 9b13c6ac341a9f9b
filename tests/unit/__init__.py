"""
Unit Tests - Testing Individual Components in Isolation.

The clock is pinned with an injected callable so results do not
depend on when the suite runs.

Test Files:
    - test_date_parser.py: DD/MM/YYYY parsing
    - test_rules.py: Each rule and ordered evaluation
    - test_request_validator.py: Commit semantics and collaborators
    - test_config_loader.py: Configuration loading/validation
    - test_adapters.py: Console audit logger and metrics collector
"""
