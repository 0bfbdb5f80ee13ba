"""
External reference model and the union of all reference types.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ExternalReferenceType(Enum):
    """External reference types across all CycloneDX versions."""
    VCS = "vcs"
    ISSUE_TRACKER = "issue-tracker"
    WEBSITE = "website"
    ADVISORIES = "advisories"
    BOM = "bom"
    MAILING_LIST = "mailing-list"
    SOCIAL = "social"
    CHAT = "chat"
    DOCUMENTATION = "documentation"
    SUPPORT = "support"
    DISTRIBUTION = "distribution"
    LICENSE = "license"
    BUILD_META = "build-meta"
    BUILD_SYSTEM = "build-system"
    OTHER = "other"
    # 1.4
    RELEASE_NOTES = "release-notes"
    # 1.5
    DISTRIBUTION_INTAKE = "distribution-intake"
    SECURITY_CONTACT = "security-contact"
    MODEL_CARD = "model-card"
    LOG = "log"
    CONFIGURATION = "configuration"
    EVIDENCE = "evidence"
    FORMULATION = "formulation"
    ATTESTATION = "attestation"
    THREAT_MODEL = "threat-model"
    ADVERSARY_MODEL = "adversary-model"
    RISK_ASSESSMENT = "risk-assessment"
    VULNERABILITY_ASSERTION = "vulnerability-assertion"
    EXPLOITABILITY_STATEMENT = "exploitability-statement"
    PENTEST_REPORT = "pentest-report"
    STATIC_ANALYSIS_REPORT = "static-analysis-report"
    DYNAMIC_ANALYSIS_REPORT = "dynamic-analysis-report"
    RUNTIME_ANALYSIS_REPORT = "runtime-analysis-report"
    COMPONENT_ANALYSIS_REPORT = "component-analysis-report"
    MATURITY_REPORT = "maturity-report"
    CERTIFICATION_REPORT = "certification-report"
    CODIFIED_INFRASTRUCTURE = "codified-infrastructure"
    QUALITY_METRICS = "quality-metrics"
    POAM = "poam"


@dataclass(frozen=True)
class ExternalReference:
    """Pointer to a resource outside the BOM."""

    url: str
    type: ExternalReferenceType
    comment: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.type, str):
            object.__setattr__(self, "type", ExternalReferenceType(self.type))

    def sort_key(self) -> Tuple[str, str, str]:
        return (self.type.value, self.url, self.comment or "")
