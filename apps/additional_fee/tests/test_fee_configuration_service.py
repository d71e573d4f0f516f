import pytest
from decimal import Decimal

from apps.additional_fee.conf import AdditionalFeeSettings
from apps.additional_fee.data_transfer_objects import FEE_FIELD, NONCE_FIELD
from apps.additional_fee.nonces import SAVE_PRODUCT_ACTION, create_nonce
from apps.additional_fee.services.fee_configuration_service import FeeConfigurationService


@pytest.fixture
def nonce():
    return create_nonce(SAVE_PRODUCT_ACTION, 1)


class TestWriteConfiguredFee:
    def test_decimal_value_reads_back_unchanged(self, configuration_service, store, aggregator):
        assert configuration_service.write_configured_fee("p1", "12.5") is True
        assert store.get("p1") == "12.5"
        assert aggregator.read_configured_fee("p1") == Decimal("12.5")

    def test_value_is_trimmed(self, configuration_service, store):
        assert configuration_service.write_configured_fee("p1", " 3 ") is True
        assert store.get("p1") == "3"

    def test_overwrites_previous_value(self, configuration_service, store):
        configuration_service.write_configured_fee("p1", "5")
        configuration_service.write_configured_fee("p1", "6")
        assert store.get("p1") == "6"

    @pytest.mark.parametrize("raw_value", ["abc", "", None, "NaN", "1.2.3", "5%"])
    def test_non_numeric_value_rejected(self, configuration_service, store, raw_value):
        assert configuration_service.write_configured_fee("p1", raw_value) is False
        assert store.get("p1") is None

    def test_rejection_keeps_previous_value(self, configuration_service, store):
        configuration_service.write_configured_fee("p1", "5")
        assert configuration_service.write_configured_fee("p1", "abc") is False
        assert store.get("p1") == "5"

    def test_negative_value_rejected_by_default(self, configuration_service, store):
        assert configuration_service.write_configured_fee("p1", "-1") is False
        assert store.get("p1") is None

    def test_negative_value_accepted_when_allowed(self, store):
        service = FeeConfigurationService(store=store, fee_settings=AdditionalFeeSettings(allow_negative=True))
        assert service.write_configured_fee("p1", "-1") is True
        assert store.get("p1") == "-1"

    def test_oversized_value_rejected(self, configuration_service, store):
        assert configuration_service.write_configured_fee("p1", "1e999999999") is False
        assert store.get("p1") is None

    def test_store_failure_is_reported(self, configuration_service, meta_repository, mocker):
        mocker.patch.object(meta_repository, "set", return_value=False)
        assert configuration_service.write_configured_fee("p1", "5") is False


class TestSaveFromRequest:
    def test_valid_request_is_persisted(self, configuration_service, store, nonce):
        data = {NONCE_FIELD: nonce, FEE_FIELD: "12.5"}
        assert configuration_service.save_from_request("p1", data, user_id=1) is True
        assert store.get("p1") == "12.5"

    def test_missing_nonce_rejected(self, configuration_service, store):
        assert configuration_service.save_from_request("p1", {FEE_FIELD: "12.5"}, user_id=1) is False
        assert store.get("p1") is None

    def test_missing_fee_rejected(self, configuration_service, store, nonce):
        assert configuration_service.save_from_request("p1", {NONCE_FIELD: nonce}, user_id=1) is False
        assert store.get("p1") is None

    def test_tampered_nonce_rejected(self, configuration_service, store, nonce):
        data = {NONCE_FIELD: nonce + "x", FEE_FIELD: "12.5"}
        assert configuration_service.save_from_request("p1", data, user_id=1) is False
        assert store.get("p1") is None

    def test_nonce_for_another_user_rejected(self, configuration_service, store, nonce):
        data = {NONCE_FIELD: nonce, FEE_FIELD: "12.5"}
        assert configuration_service.save_from_request("p1", data, user_id=2) is False
        assert store.get("p1") is None

    def test_non_numeric_fee_rejected(self, configuration_service, store, nonce):
        data = {NONCE_FIELD: nonce, FEE_FIELD: "abc"}
        assert configuration_service.save_from_request("p1", data, user_id=1) is False
        assert store.get("p1") is None

    def test_oversized_fee_rejected(self, configuration_service, store, nonce):
        data = {NONCE_FIELD: nonce, FEE_FIELD: "1e999999999"}
        assert configuration_service.save_from_request("p1", data, user_id=1) is False
        assert store.get("p1") is None
