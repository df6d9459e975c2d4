"""Tests for positives and challenges in migration reports."""

from app.core.migration import compute_migration
from app.core.schemas_ecosystem import DeployMode


class TestPositives:
    """Tests for reasons a migration is easy."""

    def test_identical_evm_chains(self, make_ecosystem):
        eco = make_ecosystem()
        report = compute_migration(eco, eco)

        assert list(report.positives) == [
            "Same language (Solidity) — existing code may port directly",
            "Same VM (EVM) — runtime behavior is identical",
            "Both EVM-native — tooling, libraries, and patterns transfer directly",
            "Same transaction model — no paradigm shift required",
            "Same deployment model — no infrastructure changes needed",
            "Excellent destination tooling (5/5)",
            "Strong destination documentation (5/5)",
            "Well-funded destination ecosystem (5/5) — grants and support available",
        ]
        assert report.challenges == ()

    def test_evm_positive_requires_native_source(self, make_ecosystem):
        src = make_ecosystem(evm_compatibility="supported")
        dst = make_ecosystem(evm_compatibility="supported")
        report = compute_migration(src, dst)

        assert not any("EVM-native" in p for p in report.positives)

    def test_same_language_names_source_mode_languages(self, make_ecosystem):
        src = make_ecosystem(
            languages=["Go", "Rust"],
            deployment_options=["appchain", "contract"],
            deploy_modes={
                "appchain": DeployMode(languages=["Go"]),
                "contract": DeployMode(languages=["Rust"]),
            },
        )
        dst = make_ecosystem(languages=["Rust"])
        report = compute_migration(src, dst, src_mode="contract")

        assert report.positives[0] == "Same language (Rust) — existing code may port directly"

    def test_tooling_and_docs_thresholds(self, make_ecosystem):
        src = make_ecosystem()
        report = compute_migration(src, make_ecosystem(tooling_maturity=4, doc_quality=3))

        assert "Excellent destination tooling (4/5)" in report.positives
        assert not any("documentation" in p for p in report.positives)

    def test_funding_uses_raw_rating(self, make_ecosystem):
        src = make_ecosystem()
        assert any(
            "Well-funded" in p
            for p in compute_migration(src, make_ecosystem(ecosystem_funding=4)).positives
        )
        assert not any(
            "Well-funded" in p
            for p in compute_migration(src, make_ecosystem(ecosystem_funding=3)).positives
        )


class TestChallenges:
    """Tests for reasons a migration is hard."""

    def test_related_family_is_both_positive_and_challenge(self, make_ecosystem):
        src = make_ecosystem(languages=["Solidity"])
        dst = make_ecosystem(languages=["Vyper"])
        report = compute_migration(src, dst)

        assert report.positives[0] == "Related language family — developer skills transfer well"
        assert report.challenges[0] == "Related but distinct languages: Solidity → Vyper"

    def test_completely_different_languages(self, make_ecosystem):
        src = make_ecosystem(languages=["Solidity", "Vyper"])
        dst = make_ecosystem(languages=["Rust", "C"])
        report = compute_migration(src, dst)

        assert report.challenges[0] == "Completely different languages: Solidity, Vyper → Rust, C"

    def test_leaving_evm(self, make_ecosystem):
        src = make_ecosystem(evm_compatibility="supported")
        dst = make_ecosystem(evm_compatibility="none")
        report = compute_migration(src, dst)

        assert "Leaving the EVM ecosystem — existing tooling won't transfer" in report.challenges

    def test_entering_evm(self, make_ecosystem):
        src = make_ecosystem(evm_compatibility="none")
        dst = make_ecosystem(evm_compatibility="native")
        report = compute_migration(src, dst)

        assert "Entering the EVM ecosystem — different paradigm from source" in report.challenges

    def test_paradigm_challenges_in_dimension_order(self, make_ecosystem):
        src = make_ecosystem(
            languages=["Solidity"],
            vm="EVM",
            transaction_model="account",
            deployment_options=["contract"],
            l2_maturity=5,
        )
        dst = make_ecosystem(
            languages=["Aiken"],
            vm="Plutus VM (UPLC)",
            transaction_model="eUTXO",
            evm_compatibility="none",
            deployment_options=["appchain"],
            l2_maturity=1,
            tooling_maturity=2,
            doc_quality=1,
            ecosystem_funding=2,
        )
        report = compute_migration(src, dst)

        assert list(report.challenges) == [
            "Completely different languages: Solidity → Aiken",
            "Different VM architecture: EVM → Plutus VM (UPLC)",
            "Different transaction model: account → eUTXO",
            "Leaving the EVM ecosystem — existing tooling won't transfer",
            "Different deployment model: contract → appchain",
            "Destination tooling is immature (2/5)",
            "Destination documentation is limited (1/5)",
            "Significant L2/rollup ecosystem gap",
            "Limited ecosystem funding (2/5) — fewer grants and support programs",
        ]
        assert report.positives == ()

    def test_small_shifts_raise_no_challenge(self, make_ecosystem):
        src = make_ecosystem(vm="EVM", transaction_model="account", l2_maturity=3)
        dst = make_ecosystem(
            vm="zkEVM",
            transaction_model="account-resource",
            evm_compatibility="supported",
            l2_maturity=2,
        )
        report = compute_migration(src, dst)

        assert report.challenges == ()

    def test_deployment_options_joined_with_slash(self, make_ecosystem):
        src = make_ecosystem(deployment_options=["contract", "rollup"])
        dst = make_ecosystem(deployment_options=["appchain"])
        report = compute_migration(src, dst)

        assert "Different deployment model: contract/rollup → appchain" in report.challenges

    def test_funding_challenge_uses_raw_rating(self, make_ecosystem):
        src = make_ecosystem()
        assert any(
            "Limited ecosystem funding (2/5)" in c
            for c in compute_migration(src, make_ecosystem(ecosystem_funding=2)).challenges
        )
        assert not any(
            "Limited ecosystem funding" in c
            for c in compute_migration(src, make_ecosystem(ecosystem_funding=3)).challenges
        )
