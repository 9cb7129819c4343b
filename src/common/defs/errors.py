"""キュレーション処理で送出する例外の定義."""


class CurationError(Exception):
    """キュレーション処理の基底例外."""


class MalformedInputError(CurationError):
    """CSVなどの入力データが解釈できない場合に送出する."""


class NotFoundError(CurationError):
    """対象のCurationItemまたはUserPreferenceが存在しない場合に送出する."""
