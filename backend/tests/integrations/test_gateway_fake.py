"""Tests for the GatewayFake test double."""

import pytest

from paygate.core.exceptions import GatewayError
from paygate.integrations.gateway import InitializeParams, PaymentGateway
from paygate.integrations.gateway_fake import GatewayFake

pytestmark = pytest.mark.unit


def test_satisfies_protocol():
    assert isinstance(GatewayFake(), PaymentGateway)


def test_unknown_scenario_rejected():
    with pytest.raises(ValueError, match="Unknown scenario"):
        GatewayFake(scenario="sometimes")


@pytest.mark.asyncio
async def test_happy_path_initialize_then_verify_round_trips_details():
    fake = GatewayFake()

    tx = await fake.initialize_transaction(InitializeParams(email="a@b.com", amount=1250))
    verified = await fake.verify_transaction(tx.reference)

    assert tx.reference.startswith("ref_")
    assert tx.access_code in tx.authorization_url
    assert verified.amount == 1250
    assert verified.customer_email == "a@b.com"
    assert fake.initialize_calls[0].amount == 1250
    assert fake.verify_calls == [tx.reference]


@pytest.mark.asyncio
async def test_references_are_unique():
    fake = GatewayFake()
    params = InitializeParams(email="a@b.com", amount=100)

    first = await fake.initialize_transaction(params)
    second = await fake.initialize_transaction(params)

    assert first.reference != second.reference


@pytest.mark.asyncio
async def test_gateway_error_scenario_raises():
    fake = GatewayFake(scenario="gateway_error")

    with pytest.raises(GatewayError, match=GatewayFake.INITIALIZE_ERROR):
        await fake.initialize_transaction(InitializeParams(email="a@b.com", amount=100))
    with pytest.raises(GatewayError, match=GatewayFake.VERIFY_ERROR):
        await fake.verify_transaction("ref_x")
