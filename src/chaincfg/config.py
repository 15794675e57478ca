"""Tool settings for chaincfg using Pydantic Settings.

These are ambient, non-secret settings. Signing keys, RPC URLs and explorer
API keys are read through ``chaincfg.secrets.SecretStore`` instead.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from chaincfg.assembler import ContractSizerOptions


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    TEXT = "text"


DEFAULT_VERIFICATION_KEYS = {
    "bsc": "BSCSCAN_API_KEY",
    "polygon": "POLYGONSCAN_API_KEY",
}


class ChainCfgSettings(BaseSettings):
    """chaincfg settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # Secrets source
    secrets_env_file: str | None = Field(default=".env", alias="CHAINCFG_SECRETS_ENV_FILE")

    # Verification: explorer identifier -> name of the API key variable
    verification_keys: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_VERIFICATION_KEYS),
        alias="CHAINCFG_VERIFICATION_KEYS",
    )

    # Contract size analysis
    sizer_alpha_sort: bool = Field(default=True, alias="CHAINCFG_SIZER_ALPHA_SORT")
    sizer_disambiguate_paths: bool = Field(
        default=False, alias="CHAINCFG_SIZER_DISAMBIGUATE_PATHS"
    )
    sizer_run_on_compile: bool = Field(default=True, alias="CHAINCFG_SIZER_RUN_ON_COMPILE")
    sizer_strict: bool = Field(default=False, alias="CHAINCFG_SIZER_STRICT")
    sizer_only: list[str] = Field(default_factory=list, alias="CHAINCFG_SIZER_ONLY")
    sizer_except: list[str] = Field(default_factory=list, alias="CHAINCFG_SIZER_EXCEPT")

    # Observability
    log_level: str = Field(default="INFO", alias="CHAINCFG_LOG_LEVEL")
    log_format: LogFormat = Field(default=LogFormat.JSON, alias="CHAINCFG_LOG_FORMAT")

    def contract_sizer_options(self) -> ContractSizerOptions:
        """Build the contract size analysis options from these settings."""
        return ContractSizerOptions(
            alpha_sort=self.sizer_alpha_sort,
            disambiguate_paths=self.sizer_disambiguate_paths,
            run_on_compile=self.sizer_run_on_compile,
            strict=self.sizer_strict,
            only=tuple(self.sizer_only),
            ignore=tuple(self.sizer_except),
        )
