"Process-wide defaults, read from the environment once"

from dataclasses import dataclass
from functools import lru_cache
import os

from wsdl2model.model import SoapVersion


@dataclass(frozen=True)
class Settings:
    soap_version: SoapVersion = SoapVersion.V1_1
    log_level: str = "info"


def load_settings(environ=None) -> Settings:
    environ = os.environ if environ is None else environ
    return Settings(
        soap_version=SoapVersion.coerce(
            environ.get("WSDL2MODEL_SOAP_VERSION", SoapVersion.V1_1.value)),
        log_level=environ.get("LOG_LEVEL", "info"))


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    return load_settings()
