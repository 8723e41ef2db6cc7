DEFAULT_STATUS_COLORS = {
    'debug': '<fg #D9ED92>',
    'info': '<fg #34A0A4>',
    'success': '<fg #52B69A>',
    'warning': '<fg #F48C06>',
    'error': '<fg #DC2F02>',
    'critical': '<fg #9D0208>',
}

# Colours used when a record is bound to a forwarded operation
OPERATION_COLORS = {
    'answer': '<fg #52B69A>',
    'void': '<fg #76C893>',
    'forward': '<fg #168AAD>',
    'bind': '<fg #34A0A4>',
    'missing': '<fg #F48C06>',
    'failed': '<fg #9D0208>',
}

FALLBACK_STATUS_COLOR = '<fg #99D98C>'
DEFAULT_FUNCTION_COLOR = '<fg #219ebc>'
DEFAULT_CLASS_COLOR = '<fg #a8dadc>'
RESET_COLOR = '\x1b[0m'

LOGLEVEL_MAPPING = {
    50: 'CRITICAL',
    40: 'ERROR',
    30: 'WARNING',
    25: 'SUCCESS',
    20: 'INFO',
    10: 'DEBUG',
    5: 'TRACE',
    0: 'NOTSET',
}

REVERSE_LOGLEVEL_MAPPING = {v: k for k, v in LOGLEVEL_MAPPING.items()}
