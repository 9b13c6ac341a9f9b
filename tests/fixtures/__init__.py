"""
Test Fixtures - Shared Test Data and Configurations.

    - sample_config.yaml: Configuration enabling audit and metrics
"""
