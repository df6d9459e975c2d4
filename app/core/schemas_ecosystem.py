"""Pydantic schemas for blockchain ecosystems.

An ecosystem is one platform a project can be migrated from or to. Records
are loaded once from the static catalog and never mutated afterwards.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class DeployMode(BaseModel):
    """Alternate language set used when one deployment shape is selected."""

    model_config = ConfigDict(frozen=True)

    languages: tuple[str, ...] = Field(
        ..., min_length=1, description="Languages used for this deployment shape"
    )


class Ecosystem(BaseModel):
    """A blockchain platform with the attributes migration scoring reads."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Stable catalog key")
    name: str = Field(..., description="Display name (e.g., 'Ethereum')")
    short: str = Field(default="", description="Short ticker-style name (e.g., 'ETH')")

    # Paradigm attributes
    languages: tuple[str, ...] = Field(
        ..., min_length=1, description="Smart contract languages, most common first"
    )
    vm: str = Field(..., description="Execution engine identifier (e.g., 'EVM')")
    transaction_model: str = Field(
        ..., description="State model tag: account, account-resource, eUTXO, object-centric, actor"
    )
    evm_compatibility: str = Field(
        default="none", description="EVM compatibility tier: native, supported, none"
    )
    deployment_options: tuple[str, ...] = Field(
        default=(),
        description="Deployment shapes offered (contract, appchain, rollup, sidechain)",
    )
    chain_layer: str = Field(default="", description="L1, L2, DA layer, ...")
    consensus: str = Field(default="", description="Consensus mechanism")

    # Ratings on a 1-5 scale
    l2_maturity: int = Field(..., ge=1, le=5, description="Maturity of the L2/rollup ecosystem")
    tooling_maturity: int = Field(..., ge=1, le=5, description="Developer tooling maturity")
    doc_quality: int = Field(..., ge=1, le=5, description="Documentation quality")
    ecosystem_funding: int = Field(..., ge=1, le=5, description="Grants and funding availability")

    tooling: tuple[str, ...] = Field(default=(), description="Notable developer tools")

    deploy_modes: Optional[dict[str, DeployMode]] = Field(
        None,
        description="Alternate language sets keyed by deployment option name",
    )

    @computed_field
    @property
    def mode_options(self) -> list[str]:
        """Deployment options a caller can pick between.

        Only ecosystems that define deploy modes and offer more than one
        deployment option expose a choice; the first entry is the default.
        """
        if self.deploy_modes and len(self.deployment_options) > 1:
            return list(self.deployment_options)
        return []

    def languages_for_mode(self, mode: Optional[str]) -> tuple[str, ...]:
        """Languages in effect for a deployment mode.

        Unknown or missing modes fall back to the default language list.
        """
        if mode is not None and self.deploy_modes:
            deploy_mode = self.deploy_modes.get(mode)
            if deploy_mode is not None:
                return deploy_mode.languages
        return self.languages
