"""Pydantic models for explorer payloads and the verification form."""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator


class NameStrategy(str, Enum):
    """How the main source file is picked out of a standard JSON input."""

    BY_HINT = "by-hint"
    FIRST_KEY = "first-key"


class ContractRecord(BaseModel):
    """First element of the lookup service's `getsourcecode` result array."""

    model_config = ConfigDict(
        extra="allow",
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    source_code: str = Field(
        default="",
        alias="SourceCode",
        description="Verified source, possibly a standard JSON input wrapped in an extra brace pair.",
    )
    contract_name: Optional[str] = Field(default=None, alias="ContractName")
    compiler_version: Optional[str] = Field(default=None, alias="CompilerVersion")
    optimization_used: Optional[str] = Field(default=None, alias="OptimizationUsed")
    runs: Optional[str] = Field(default=None, alias="Runs")
    constructor_arguments: Optional[str] = Field(default=None, alias="ConstructorArguments")
    evm_version: Optional[str] = Field(default=None, alias="EVMVersion")

    @field_validator("source_code", mode="before")
    @classmethod
    def _missing_source_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class VerificationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: str
    contract_address: str
    contract_name: str
    compiler_version: str = ""
    optimization_used: str = ""
    runs: str = ""
    constructor_arguments: str = ""
    source_code: str
    evm_version: str = ""

    module: str = "contract"
    action: str = "verifysourcecode"
    code_format: str = "solidity-standard-json-input"

    def to_form(self) -> Dict[str, str]:
        """
        Render the request with the field names the explorer API expects.

        Returns:
            Mapping ready to be form-encoded
        """
        return {
            "apikey": self.api_key,
            "module": self.module,
            "action": self.action,
            "contractaddress": self.contract_address,
            "codeformat": self.code_format,
            "contractname": self.contract_name,
            "compilerversion": self.compiler_version,
            "optimizationUsed": self.optimization_used,
            "runs": self.runs,
            # Etherscan-family explorers only accept this spelling
            "constructorArguements": self.constructor_arguments,
            "sourceCode": self.source_code,
            "evmversion": self.evm_version,
        }


class VerificationResponse(BaseModel):
    """Standard `{status, message, result}` envelope of a verification submission."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    status: Optional[str] = None
    message: Optional[str] = None
    result: Any = None

    @property
    def is_accepted(self) -> bool:
        return self.status == "1"
