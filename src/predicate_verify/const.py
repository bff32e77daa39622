ERRORS = {
  "E_ABI_INVALID": "ABI configurables are malformed",
  "E_LAYOUT_EMPTY": "Layout descriptor has no configurables",
  "E_OFFSET_RANGE": "Configurables offset outside program image",
  "E_SIG_MALFORMED": "Signature is malformed",
  "E_LOADER_MALFORMED": "Loader fields have the wrong size",
  "E_NOT_A_LOADER": "Image too short to hold a loader header",
  "E_BLOB_ID_MISMATCH": "Loader blob id does not match program code section",
}


class PredicateError(ValueError):
    code = ""

    def __init__(self, detail: str = ""):
        message = ERRORS[self.code]
        super().__init__(f"{message}: {detail}" if detail else message)
        self.detail = detail


class InvalidAbi(PredicateError):
    code = "E_ABI_INVALID"


class EmptyLayout(PredicateError):
    code = "E_LAYOUT_EMPTY"


class OffsetOutOfRange(PredicateError):
    code = "E_OFFSET_RANGE"


class MalformedSignature(PredicateError):
    code = "E_SIG_MALFORMED"


class MalformedLoader(PredicateError):
    code = "E_LOADER_MALFORMED"
