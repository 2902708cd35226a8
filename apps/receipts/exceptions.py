"""Receipt processing exceptions."""

from rest_framework import status

from apps.common.exceptions import ServiceError


class ReceiptError(ServiceError):
    """Base class for every receipt processing failure."""

    default_code = 'RECEIPT_ERROR'


class MalformedPayload(ReceiptError):
    """The submitted body could not be decoded into a receipt."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_code = 'MALFORMED_PAYLOAD'
    default_message = 'Invalid request payload'

    def __init__(self, message=None, code=None, errors=None):
        super().__init__(message, code)
        self.errors = errors or {}


class ReceiptValidationError(ReceiptError):
    """A decoded receipt failed one of the validation checks."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_code = 'INVALID_RECEIPT'
    default_message = 'The receipt is invalid.'


class EmptyRetailer(ReceiptValidationError):
    default_code = 'EMPTY_RETAILER'
    default_message = 'retailer is required'


class InvalidDate(ReceiptValidationError):
    default_code = 'INVALID_DATE'
    default_message = 'invalid purchase date format'


class InvalidTime(ReceiptValidationError):
    default_code = 'INVALID_TIME'
    default_message = 'invalid purchase time format'


class NoItems(ReceiptValidationError):
    default_code = 'NO_ITEMS'
    default_message = 'items are required'


class InvalidTotal(ReceiptValidationError):
    default_code = 'INVALID_TOTAL'
    default_message = 'invalid total format'


class ReceiptNotFound(ReceiptError):
    """No score is stored under the requested id."""

    status_code = status.HTTP_404_NOT_FOUND
    default_code = 'RECEIPT_NOT_FOUND'
    default_message = 'Receipt not found'


class StorageFailure(ReceiptError):
    """The score store could not complete a read or write."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_code = 'STORAGE_FAILURE'
    default_message = 'Failed to process receipt'
