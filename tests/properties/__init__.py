"""
Property-based testing using Hypothesis.

This package contains property tests that verify mathematical invariants
hold across randomly generated inputs.

Modules:
    test_greeks_properties: Black-Scholes and swaption invariants (bounds, parity)
    test_path_properties: Synthesized path invariants (shape, positivity, summary)
"""
