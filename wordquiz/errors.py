from __future__ import annotations
from typing import Optional

# User-facing messages, shown as-is by the quiz page
MSG_EMPTY_INPUT = 'يرجى إدخال كلمة!'
MSG_INVALID_FORMAT = 'الكلمة يجب أن تكون مكونة من 3 أحرف عربية فقط!'
MSG_RESOURCE_LOAD = 'خطأ في تحميل القاموس! يرجى التأكد من وجود ملف words.txt'
MSG_FILE_READ = 'حدث خطأ أثناء قراءة الملف!'
MSG_PERSIST = 'تعذر حفظ القاموس، ستبقى التغييرات حتى إغلاق الجلسة فقط.'
MSG_EXPORTED = 'تم تصدير القاموس بنجاح!'
MSG_EXPORT_FAILED = 'حدث خطأ أثناء تصدير القاموس!'


class QuizError(Exception):
    """Base class for recoverable quiz errors. Each carries a display message."""

    message = ''

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class EmptyInput(QuizError):
    message = MSG_EMPTY_INPUT


class InvalidFormat(QuizError):
    message = MSG_INVALID_FORMAT


class AlreadyExists(QuizError):
    def __init__(self, word: str):
        super().__init__(f'الكلمة "{word}" موجودة بالفعل في القاموس!')
        self.word = word


class ResourceLoadFailure(QuizError):
    message = MSG_RESOURCE_LOAD


class FileReadFailure(QuizError):
    message = MSG_FILE_READ


class PersistFailure(QuizError):
    message = MSG_PERSIST


class ExportFailure(QuizError):
    message = MSG_EXPORT_FAILED
