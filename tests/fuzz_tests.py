"""
Fuzz Testing for deployment helpers
"""

from hypothesis import given, strategies as st

from blockchain.contract_factory import apply_gas_buffer, GAS_LIMIT_BUFFER


class TestGasBufferFuzzing:
    """Fuzz test gas limit buffering"""

    @given(gas_estimate=st.integers(min_value=21000, max_value=30000000))
    def test_buffer_covers_estimate(self, gas_estimate):
        gas_limit = apply_gas_buffer(gas_estimate)

        assert isinstance(gas_limit, int)
        assert gas_limit >= gas_estimate
        assert gas_limit <= gas_estimate * GAS_LIMIT_BUFFER

    @given(
        gas_estimate=st.integers(min_value=21000, max_value=30000000),
        buffer=st.floats(min_value=1.0, max_value=3.0)
    )
    def test_custom_buffer(self, gas_estimate, buffer):
        assert apply_gas_buffer(gas_estimate, buffer) >= gas_estimate
