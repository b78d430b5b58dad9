from pf2statblock.constants import PARSE_FAILURE_DETAILS


class StatBlockError(Exception):
    error = "Extraction Failed"
    details = None


class ReadinessTimeout(StatBlockError):
    error = "Content failed to load"


class MissingSourceData(StatBlockError):
    error = "Missing source data"


class UnrecognizedSchema(StatBlockError):
    error = "Unrecognized data schema"


class ParseFailure(StatBlockError):
    error = "Failed to parse creature data"
    details = PARSE_FAILURE_DETAILS


def error_record(exc):
    if not isinstance(exc, StatBlockError):
        exc = ParseFailure(str(exc) or exc.__class__.__name__)
    record = {'error': exc.error}
    message = str(exc)
    if message:
        record['message'] = message
    if exc.details:
        record['details'] = exc.details
    return record


def is_error_record(record):
    return 'error' in record and 'Name' not in record
