"""
Property-based testing using Hypothesis.

This package contains property tests that verify invariants hold across
randomly generated inputs.

Modules:
    test_crash_properties: Crash curve and calendar arithmetic invariants
    test_crypto_properties: Crypto availability, fee and staking invariants
"""
