from .admission import RecordAdmission, is_batch, normalize_record
from .escaping import escape_entries, escape_xml

__all__ = [
    'RecordAdmission',
    'is_batch',
    'normalize_record',
    'escape_entries',
    'escape_xml',
]
