"""Static reference catalogs: service areas, service types, engagement states."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from honeycomb.engine.domain import EngagementState, ServiceAreaType


@dataclass(frozen=True)
class ServiceAreaInfo:
    display_name: str
    description: str
    category: str


@dataclass(frozen=True)
class ServiceTypeEntry:
    id: str
    name: str
    abbreviation: str
    category: str
    description: str = ""
    typical_duration_months: int | None = None
    complexity_level: str = "MEDIUM"
    is_active: bool = True


@dataclass(frozen=True)
class EngagementStateInfo:
    display_name: str
    description: str
    color: str
    # Higher = more engaged
    priority: int


SERVICE_AREAS: Mapping[str, ServiceAreaInfo] = {
    ServiceAreaType.ELN: ServiceAreaInfo(
        "Electronic Lab Notebook",
        "Digital laboratory data management and documentation",
        "Laboratory Systems",
    ),
    ServiceAreaType.BI: ServiceAreaInfo(
        "Business Intelligence", "Data analytics and reporting solutions", "Analytics"
    ),
    ServiceAreaType.SDMS: ServiceAreaInfo(
        "Scientific Data Management",
        "Scientific data storage and management systems",
        "Data Management",
    ),
    ServiceAreaType.CDS: ServiceAreaInfo(
        "Clinical Data Systems",
        "Clinical trial data management and analysis",
        "Clinical Systems",
    ),
    ServiceAreaType.LIMS: ServiceAreaInfo(
        "Laboratory Information Management",
        "Laboratory workflow and sample management",
        "Laboratory Systems",
    ),
    ServiceAreaType.ODM: ServiceAreaInfo(
        "Operational Data Store",
        "Operational data integration and management",
        "Data Management",
    ),
    ServiceAreaType.CM: ServiceAreaInfo(
        "Content Management", "Document and content management systems", "Content Systems"
    ),
    ServiceAreaType.STRATEGIC_CONSULTING: ServiceAreaInfo(
        "Strategic Consulting", "Business strategy and transformation consulting", "Consulting"
    ),
    ServiceAreaType.DIGITAL_TRANSFORMATION: ServiceAreaInfo(
        "Digital Transformation", "Digital modernization and technology adoption", "Consulting"
    ),
    ServiceAreaType.REGULATORY_AFFAIRS: ServiceAreaInfo(
        "Regulatory Affairs", "Regulatory compliance and submission management", "Compliance"
    ),
    ServiceAreaType.QUALITY_ASSURANCE: ServiceAreaInfo(
        "Quality Assurance", "Quality management and validation services", "Quality"
    ),
}


ENGAGEMENT_STATES: Mapping[EngagementState, EngagementStateInfo] = {
    EngagementState.NOT_ENGAGED: EngagementStateInfo(
        "Not Engaged", "No current engagement or activity", "#E5E5E5", 0
    ),
    EngagementState.CURRENTLY_ENGAGED: EngagementStateInfo(
        "Currently Engaged", "Active engagement in progress", "#4A90E2", 2
    ),
    EngagementState.ACTIVELY_PURSUING: EngagementStateInfo(
        "Actively Pursuing", "Pursuing engagement opportunities", "#F5A623", 1
    ),
}


def _st(id: str, name: str, abbr: str, category: str, months: int, level: str) -> ServiceTypeEntry:
    return ServiceTypeEntry(
        id=id,
        name=name,
        abbreviation=abbr,
        category=category,
        typical_duration_months=months,
        complexity_level=level,
    )


# ST_ODM is intentionally absent: lookups for it fall back to the service area id.
DEFAULT_SERVICE_TYPES: Mapping[str, ServiceTypeEntry] = {
    e.id: e
    for e in (
        _st("ST_ELN", "Electronic Lab Notebook", "ELN", "Data Management", 6, "MEDIUM"),
        _st("ST_LIMS", "Laboratory Information Management System", "LIMS", "Data Management", 12, "HIGH"),
        _st("ST_BI", "Business Intelligence", "BI", "Analytics", 9, "MEDIUM"),
        _st("ST_SDMS", "Scientific Data Management System", "SDMS", "Data Management", 18, "HIGH"),
        _st("ST_CDS", "Clinical Data Systems", "CDS", "Clinical", 15, "HIGH"),
        _st("ST_EDC", "Electronic Data Capture", "EDC", "Clinical", 12, "HIGH"),
        _st("ST_CTMS", "Clinical Trial Management System", "CTMS", "Clinical", 15, "HIGH"),
        _st("ST_QMS", "Quality Management System", "QMS", "Quality", 12, "MEDIUM"),
        _st("ST_MES", "Manufacturing Execution System", "MES", "Operations", 18, "HIGH"),
        _st("ST_ERP", "Enterprise Resource Planning", "ERP", "Operations", 24, "HIGH"),
        _st("ST_REGULATORY_SUBMISSION", "Regulatory Submission Platform", "RSP", "Compliance", 9, "MEDIUM"),
        _st("ST_PHARMACOVIGILANCE", "Pharmacovigilance System", "PV", "Safety", 12, "MEDIUM"),
        _st("ST_CM", "Content Management", "CM", "Content", 6, "LOW"),
    )
}


def service_type_abbreviation(
    service_type_id: str | None,
    catalog: Mapping[str, ServiceTypeEntry] = DEFAULT_SERVICE_TYPES,
) -> str | None:
    """Abbreviation for a service type id, or None when the id is unknown."""
    if not service_type_id:
        return None
    entry = catalog.get(service_type_id)
    if entry is None or not entry.abbreviation:
        return None
    return entry.abbreviation
