import pytest

from products_api.controllers.products_controller import DEFAULT_PRODUCTS, ProductsController
from products_api.error_handler import InvocationError
from products_api.integrations.clients.mocks.response_recorder import ResponseRecorder
from products_api.integrations.contracts.interfaces import Product

EXPECTED_PAYLOAD = [{"name": "Default product", "description": "product description", "price": 100}]


class FakeSink:
    """Sink that only remembers payloads, without subclassing ResponseSink."""

    def __init__(self):
        self.payloads = []

    def emit(self, payload):
        self.payloads.append(payload)


def test_list_products_calls_response_with_default_products(controller, recorder):
    controller.list_products({}, recorder)

    assert recorder.was_called() is True
    assert recorder.was_called_with(EXPECTED_PAYLOAD) is True


def test_list_products_emits_exactly_once(controller, recorder):
    result = controller.list_products({}, recorder)

    assert result is None
    assert recorder.call_count == 1
    assert len(recorder.calls) == 1


def test_emitted_payload_is_a_list_of_products(controller, recorder):
    controller.list_products(None, recorder)

    payload = recorder.calls[0]
    assert isinstance(payload, list)
    assert payload == [Product(name="Default product", description="product description", price=100)]


def test_payload_is_identical_across_calls():
    payloads = []
    for _ in range(3):
        recorder = ResponseRecorder()
        ProductsController().list_products({}, recorder)
        payloads.append(recorder.calls[0])

    assert payloads[0] == payloads[1] == payloads[2]


def test_request_is_ignored(controller):
    first, second = ResponseRecorder(), ResponseRecorder()
    controller.list_products({}, first)
    controller.list_products({"query": {"page": 2}}, second)

    assert first.calls == second.calls


def test_duck_typed_sink_is_accepted(controller):
    fake = FakeSink()
    controller.list_products({}, fake)

    assert fake.payloads == [list(DEFAULT_PRODUCTS)]


def test_mutating_emitted_payload_does_not_change_defaults(controller, recorder):
    controller.list_products({}, recorder)
    recorder.calls[0].clear()

    again = ResponseRecorder()
    controller.list_products({}, again)
    assert again.was_called_with(EXPECTED_PAYLOAD)
    assert len(DEFAULT_PRODUCTS) == 1


def test_sink_without_emit_raises_invocation_error(controller):
    with pytest.raises(InvocationError) as exc_info:
        controller.list_products({}, object())

    assert exc_info.value.capability == "emit"
    assert exc_info.value.target_type == "object"


def test_non_callable_emit_raises_invocation_error(controller):
    class BrokenSink:
        emit = "not a method"

    with pytest.raises(InvocationError):
        controller.list_products({}, BrokenSink())
