"""Context fields injected into log records."""

import logging

from paybridge.common.logging import ContextFilter, order_id_ctx, trace_id_ctx


def test_context_filter_injects_correlation_fields():
    record = logging.LogRecord("paybridge", logging.INFO, __file__, 1, "callback_received", None, None)
    trace_token = trace_id_ctx.set("trace-1")
    order_token = order_id_ctx.set("order_abc")
    try:
        assert ContextFilter("paybridge-checkout").filter(record)
    finally:
        trace_id_ctx.reset(trace_token)
        order_id_ctx.reset(order_token)

    assert record.service_name == "paybridge-checkout"
    assert record.trace_id == "trace-1"
    assert record.order_id == "order_abc"
    assert record.payment_id == ""
