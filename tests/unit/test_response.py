"""Tests for response classification and Retry-After parsing."""

from datetime import datetime, timedelta, timezone

import pytest

from fcm_client.client.response import (
    ErrorReason,
    FcmResponse,
    RetryAfter,
    RetryAfterDate,
    RetryAfterDelay,
    classify_response,
    get_header,
)
from fcm_client.core.exceptions import (
    FcmError,
    InvalidMessageError,
    ServerError,
    UnauthorizedError,
)


class TestRetryAfter:
    """Tests for Retry-After header parsing."""

    def test_delay_seconds_form(self):
        retry_after = RetryAfter.parse("30")
        assert retry_after == RetryAfterDelay(timedelta(seconds=30))
        assert retry_after.delay_seconds() == 30.0

    def test_surrounding_whitespace_ignored(self):
        assert RetryAfter.parse("  120 ") == RetryAfterDelay(timedelta(seconds=120))

    def test_http_date_form(self):
        retry_after = RetryAfter.parse("Wed, 21 Oct 2015 07:28:00 GMT")
        assert isinstance(retry_after, RetryAfterDate)
        assert retry_after.at == datetime(2015, 10, 21, 7, 28, tzinfo=timezone.utc)

    def test_http_date_delay_relative_to_now(self):
        retry_after = RetryAfterDate(datetime(2030, 1, 1, 0, 1, tzinfo=timezone.utc))
        now = datetime(2030, 1, 1, 0, 0, tzinfo=timezone.utc)
        assert retry_after.delay_seconds(now) == 60.0

    def test_past_date_never_negative(self):
        retry_after = RetryAfterDate(datetime(2000, 1, 1, tzinfo=timezone.utc))
        assert retry_after.delay_seconds() == 0.0

    @pytest.mark.parametrize(
        "value",
        [None, "", "soon", "-5", "1.5", "Someday, 99 Foo 20xx", "\u00b2", "9" * 5000, "100000000000000"],
    )
    def test_unparseable_values_are_absent(self, value):
        """Anything that is neither form is treated as no hint."""
        assert RetryAfter.parse(value) is None

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            RetryAfter()


class TestFcmResponse:
    """Tests for the success body model."""

    def test_name_and_message_id(self):
        response = FcmResponse.model_validate({"name": "projects/p/messages/0:1500415314455276"})
        assert response.error is None
        assert response.message_id == "0:1500415314455276"

    def test_known_error_reason(self):
        assert FcmResponse.model_validate({"error": "UNREGISTERED"}).error is ErrorReason.UNREGISTERED

    def test_unknown_error_reason_maps_to_unspecified(self):
        response = FcmResponse.model_validate({"error": "SOMETHING_NEW"})
        assert response.error is ErrorReason.UNSPECIFIED_ERROR

    def test_extra_fields_kept(self):
        response = FcmResponse.model_validate({"name": "n", "extra": 1})
        assert response.model_extra == {"extra": 1}


class TestClassifyResponse:
    """Tests for the status/headers/body decision table."""

    def test_success(self):
        response = classify_response(200, {}, b'{"name": "projects/p/messages/1"}')
        assert isinstance(response, FcmResponse)
        assert response.name == "projects/p/messages/1"

    def test_success_with_non_retryable_reason(self):
        """A non-retryable embedded reason is returned to the caller."""
        response = classify_response(200, {}, '{"error": "INVALID_ARGUMENT"}')
        assert response.error is ErrorReason.INVALID_ARGUMENT

    @pytest.mark.parametrize("reason", ["UNAVAILABLE", "INTERNAL"])
    def test_retryable_reason_in_200_body(self, reason):
        """A 200 can still carry a retryable server failure."""
        with pytest.raises(ServerError) as exc_info:
            classify_response(200, {"Retry-After": "10"}, f'{{"error": "{reason}"}}')
        assert exc_info.value.retry_after == RetryAfterDelay(timedelta(seconds=10))
        assert exc_info.value.retryable is True

    @pytest.mark.parametrize("body", [b"", b"not json", b"[1, 2]", b'"text"', b'{"error": 5}', b'{"name": 7}'])
    def test_malformed_200_body_is_an_error(self, body):
        """A body that does not parse never counts as success."""
        with pytest.raises(InvalidMessageError) as exc_info:
            classify_response(200, {}, body)
        assert exc_info.value.error_code == "MALFORMED_RESPONSE"

    @pytest.mark.parametrize("body", [b"", b'{"name": "projects/p/messages/1"}', b"anything"])
    def test_unauthorized_regardless_of_body(self, body):
        with pytest.raises(UnauthorizedError) as exc_info:
            classify_response(401, {}, body)
        assert exc_info.value.retryable is False

    def test_bad_request_carries_body_text(self):
        with pytest.raises(InvalidMessageError) as exc_info:
            classify_response(400, {}, b"bad token format")
        assert "bad token format" in str(exc_info.value)
        assert exc_info.value.message == "bad token format"

    def test_server_error_with_retry_after(self):
        with pytest.raises(ServerError) as exc_info:
            classify_response(503, {"Retry-After": "30"}, b"")
        assert exc_info.value.retry_after == RetryAfterDelay(timedelta(seconds=30))
        assert exc_info.value.details["retry_after_seconds"] == 30.0

    def test_server_error_without_retry_after(self):
        with pytest.raises(ServerError) as exc_info:
            classify_response(503, {}, b"")
        assert exc_info.value.retry_after is None

    @pytest.mark.parametrize("status", [500, 502, 504, 599])
    def test_any_5xx_is_server_error(self, status):
        with pytest.raises(ServerError):
            classify_response(status, {}, b"")

    def test_retry_after_header_case_insensitive(self):
        with pytest.raises(ServerError) as exc_info:
            classify_response(500, {"retry-after": "7"}, b"")
        assert exc_info.value.retry_after == RetryAfterDelay(timedelta(seconds=7))

    def test_garbage_retry_after_does_not_fail_classification(self):
        with pytest.raises(ServerError) as exc_info:
            classify_response(503, {"Retry-After": "later please"}, b"")
        assert exc_info.value.retry_after is None

    @pytest.mark.parametrize("value", ["100000000000000", "9" * 5000, "\u00b2"])
    def test_out_of_range_retry_after_is_ignored(self, value):
        with pytest.raises(ServerError) as exc_info:
            classify_response(503, {"Retry-After": value}, b"")
        assert exc_info.value.retry_after is None

    @pytest.mark.parametrize("status", [201, 204, 302, 403, 404, 429])
    def test_other_statuses_are_unknown_error(self, status):
        with pytest.raises(InvalidMessageError) as exc_info:
            classify_response(status, {}, b"whatever")
        assert exc_info.value.message == "Unknown Error"
        assert exc_info.value.details["status_code"] == status

    def test_all_errors_share_base(self):
        for status in (400, 401, 404, 503):
            with pytest.raises(FcmError):
                classify_response(status, {}, b"")


class TestGetHeader:
    def test_exact_and_case_insensitive(self):
        headers = {"Retry-After": "1", "content-type": "application/json"}
        assert get_header(headers, "Retry-After") == "1"
        assert get_header(headers, "Content-Type") == "application/json"
        assert get_header(headers, "X-Missing") is None
