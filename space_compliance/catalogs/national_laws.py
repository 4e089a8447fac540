"""
National licensing requirements of the priority jurisdictions.

Each entry belongs to one jurisdiction and is constrained to the licensed
activities its law covers. Germany only licenses remote-sensing data
distribution, so its entries are limited to data providers.
"""

from __future__ import annotations

from typing import Any

FRAMEWORK: dict[str, Any] = {
    "framework": "national",
    "name": "National space laws",
    "category_weights": {
        "technical_assessment": 0.20,
        "insurance": 0.15,
        "safety_assessment": 0.12,
        "debris_plan": 0.10,
        "end_of_life_plan": 0.10,
        "financial_guarantee": 0.08,
        "environmental_assessment": 0.05,
        "corporate_governance": 0.04,
        "notification": 0.04,
        "operational_plan": 0.04,
        "data_handling": 0.04,
        "security_clearance": 0.04,
    },
    "category_labels": {
        "technical_assessment": "Technical Assessment",
        "insurance": "Third-Party Liability Insurance",
        "safety_assessment": "Safety Assessment",
        "debris_plan": "Debris Mitigation Plan",
        "end_of_life_plan": "End-of-Life Plan",
        "financial_guarantee": "Financial Guarantee",
        "environmental_assessment": "Environmental Assessment",
        "corporate_governance": "Corporate Governance",
        "notification": "Notification",
        "operational_plan": "Operational Plan",
        "data_handling": "Data Handling",
        "security_clearance": "Security Clearance",
    },
}

# Activities a general authorization regime licenses
_LICENSED = [
    "spacecraft-operator", "launch-operator", "launch-site-operator",
    "in-space-servicer", "data-provider",
]
# Activities with objects left in orbit
_ORBITAL = ["spacecraft-operator", "in-space-servicer", "data-provider"]
_DATA = ["data-provider"]

_SEVERITY = {
    "technical_assessment": "critical",
    "insurance": "critical",
    "safety_assessment": "critical",
    "data_handling": "critical",
    "debris_plan": "major",
    "end_of_life_plan": "major",
    "financial_guarantee": "major",
    "environmental_assessment": "major",
    "operational_plan": "major",
    "security_clearance": "major",
    "corporate_governance": "minor",
    "notification": "minor",
}

_EFFORT = {
    "technical_assessment": "high",
    "safety_assessment": "high",
    "environmental_assessment": "high",
    "security_clearance": "high",
    "debris_plan": "medium",
    "end_of_life_plan": "medium",
    "insurance": "medium",
    "financial_guarantee": "medium",
    "operational_plan": "medium",
    "data_handling": "medium",
    "corporate_governance": "low",
    "notification": "low",
}

# (jurisdiction, id, category, article_ref, title, description, activities)
_ENTRIES: list[tuple[str, str, str, str, str, str, list[str]]] = [
    # ── France (LOS 2008) ────────────────────────────────
    ("FR", "fr-tech-assessment", "technical_assessment", "Art. 4, Décret 2009-643",
     "Technical Conformity Assessment",
     "CNES checks the system against the French technical regulation before "
     "authorization is granted.", _LICENSED),
    ("FR", "fr-financial-guarantee", "financial_guarantee", "Art. 6 LOS",
     "Financial Guarantee",
     "The operator shows it can meet liability up to the State-guaranteed ceiling.",
     _LICENSED),
    ("FR", "fr-insurance", "insurance", "Art. 6 LOS",
     "Mandatory Third-Party Liability Insurance",
     "Cover for damage to third parties must be in place for the whole operation.",
     _LICENSED),
    ("FR", "fr-debris-plan", "debris_plan", "Art. 5 LOS, Arrêté technique 2011",
     "Debris Mitigation Plan",
     "Limit debris released during normal operations and plan for break-up risks.",
     _LICENSED),
    ("FR", "fr-safety-assessment", "safety_assessment", "Art. 4-5 LOS",
     "Safety Assessment",
     "Hazard study covering people, property and public health.", _LICENSED),
    ("FR", "fr-end-of-life", "end_of_life_plan", "Art. 5 LOS, FSOA Technical Regulation",
     "End-of-Life Plan",
     "De-orbit or move to a graveyard orbit within the prescribed period.", _ORBITAL),
    # ── United Kingdom (SIA 2018) ────────────────────────
    ("UK", "uk-tech-assessment", "technical_assessment", "Section 8 SIA 2018",
     "Technical Assessment",
     "The regulator reviews the mission design and operating procedures.", _LICENSED),
    ("UK", "uk-insurance", "insurance", "Section 12 SIA 2018",
     "Third-Party Liability Insurance",
     "Insurance against third-party claims at the level set in the licence.",
     _LICENSED),
    ("UK", "uk-safety-assessment", "safety_assessment", "Section 9 SIA 2018",
     "Safety Assessment",
     "Safety case showing risks to the public are as low as reasonably practicable.",
     _LICENSED),
    ("UK", "uk-environmental", "environmental_assessment", "Section 10 SIA 2018",
     "Environmental Assessment",
     "Assessment of environmental effects of the licensed activity.", _LICENSED),
    ("UK", "uk-corporate-governance", "corporate_governance", "Section 8(4) SIA 2018",
     "Corporate Governance Requirements",
     "Fit-and-proper checks on the applicant and its controllers.", _LICENSED),
    ("UK", "uk-end-of-life", "end_of_life_plan",
     "Sections 9-10 SIA 2018, UK Space Agency Guidelines",
     "End-of-Life Disposal Plan",
     "Disposal arrangements for each spacecraft at end of mission.", _ORBITAL),
    # ── Belgium (Space Act 2005) ─────────────────────────
    ("BE", "be-tech-assessment", "technical_assessment", "Art. 4",
     "Technical Dossier",
     "Technical file describing the object and the planned operations.", _LICENSED),
    ("BE", "be-insurance", "insurance", "Art. 10",
     "Liability Insurance",
     "Insurance covering the operator's liability towards third parties.", _LICENSED),
    ("BE", "be-safety-assessment", "safety_assessment", "Art. 5",
     "Safety Assessment",
     "Assessment of risks to persons, property and the environment.", _LICENSED),
    ("BE", "be-notification", "notification", "Art. 3",
     "Prior Notification",
     "BELSPO is notified before the activity starts.", _LICENSED),
    ("BE", "be-end-of-life", "end_of_life_plan", "Art. 5, Royal Decree 2014",
     "End-of-Life Plan",
     "Plan for removal of the object at end of mission.", _ORBITAL),
    # ── Netherlands (Space Activities Act 2007) ──────────
    ("NL", "nl-tech-assessment", "technical_assessment", "Art. 3",
     "Technical Assessment",
     "Review of the technical design and mission profile.", _LICENSED),
    ("NL", "nl-insurance", "insurance", "Art. 3(3)(d)",
     "Third-Party Liability Insurance",
     "Maximum insurable cover for third-party damage.", _LICENSED),
    ("NL", "nl-financial-guarantee", "financial_guarantee", "Art. 3(3)(e)",
     "Financial Guarantee",
     "Financial means to meet obligations arising from the licence.", _LICENSED),
    ("NL", "nl-notification", "notification", "Art. 2",
     "Activity Notification",
     "Notify the Minister of the intended space activity.", _LICENSED),
    ("NL", "nl-end-of-life", "end_of_life_plan", "Art. 3(3), Space Activities Decree",
     "End-of-Life Disposal Plan",
     "Disposal measures for the object at end of operations.", _ORBITAL),
    # ── Luxembourg (Space Activities Act 2020) ───────────
    ("LU", "lu-tech-assessment", "technical_assessment", "Art. 5",
     "Technical Assessment",
     "Technical review of the mission by the Luxembourg Space Agency.", _LICENSED),
    ("LU", "lu-insurance", "insurance", "Art. 10",
     "Insurance Coverage",
     "Adequate insurance or equivalent financial cover for third-party damage.",
     _LICENSED),
    ("LU", "lu-financial-guarantee", "financial_guarantee", "Art. 8",
     "Financial Guarantee",
     "Solid financial basis for the activity, checked at application.", _LICENSED),
    ("LU", "lu-operational-plan", "operational_plan", "Art. 6",
     "Operational Plan",
     "Description of the operations, their duration and the risks involved.",
     _LICENSED),
    ("LU", "lu-end-of-life", "end_of_life_plan", "Art. 7",
     "End-of-Life Plan",
     "Measures for safe disposal at end of mission.", _ORBITAL),
    # ── Austria (Outer Space Act 2011) ───────────────────
    ("AT", "at-tech-assessment", "technical_assessment", "§ 4",
     "Technical Assessment",
     "Technical qualification of the operator and the object.", _LICENSED),
    ("AT", "at-insurance", "insurance", "§ 4(2)(5)",
     "Third-Party Liability Insurance",
     "Liability insurance with the minimum sum set by the Act.", _LICENSED),
    ("AT", "at-financial-guarantee", "financial_guarantee", "§ 4(2)(4)",
     "Financial Guarantee",
     "Evidence the operator can carry the financial risk.", _LICENSED),
    ("AT", "at-debris-plan", "debris_plan", "§ 5",
     "Debris Mitigation Plan",
     "Measures following recognised debris mitigation guidelines.", _LICENSED),
    ("AT", "at-end-of-life", "end_of_life_plan", "§ 5",
     "End-of-Life Plan",
     "Removal of the object at end of mission.", _ORBITAL),
    # ── Denmark (Outer Space Act 2016) ───────────────────
    ("DK", "dk-tech-assessment", "technical_assessment", "§ 4",
     "Technical Assessment",
     "Technical review of the object and operations.", _LICENSED),
    ("DK", "dk-insurance", "insurance", "§ 9",
     "Third-Party Liability Insurance",
     "Insurance for damage caused to third parties.", _LICENSED),
    ("DK", "dk-debris-plan", "debris_plan", "§ 5",
     "Debris Mitigation Plan",
     "Limit debris generation in line with international guidelines.", _LICENSED),
    ("DK", "dk-end-of-life", "end_of_life_plan", "§ 5, Executive Order 2017",
     "End-of-Life Plan",
     "Disposal plan for the object at end of mission.", _ORBITAL),
    # ── Germany (SatDSiG 2007) ───────────────────────────
    ("DE", "de-data-handling", "data_handling", "§ 3 SatDSiG",
     "Remote Sensing Data Handling License",
     "Licence to operate a high-grade Earth observation system and distribute "
     "its data.", _DATA),
    ("DE", "de-security-clearance", "security_clearance", "§ 17 SatDSiG",
     "Security Assessment for High-Resolution Data",
     "Sensitivity check before each distribution of high-resolution data.", _DATA),
    # ── Italy (Space Economy Law 2018) ───────────────────
    ("IT", "it-tech-assessment", "technical_assessment", "Art. 3",
     "Technical Assessment",
     "ASI review of the technical and operational design.", _LICENSED),
    ("IT", "it-insurance", "insurance", "Art. 7",
     "Third-Party Liability Insurance",
     "Cover for third-party damage during the activity.", _LICENSED),
    ("IT", "it-safety-assessment", "safety_assessment", "Art. 4",
     "Safety Assessment",
     "Assessment of risks to people and property.", _LICENSED),
    ("IT", "it-debris-plan", "debris_plan", "Art. 5",
     "Debris Mitigation Plan",
     "Debris mitigation measures for the mission.", _LICENSED),
    ("IT", "it-end-of-life", "end_of_life_plan", "Art. 5, ASI Guidelines",
     "End-of-Life Plan",
     "End-of-mission disposal following ASI guidance.", _ORBITAL),
    # ── Norway (Space Act 1969) ──────────────────────────
    ("NO", "no-tech-assessment", "technical_assessment", "§ 2",
     "Technical Assessment",
     "Technical review as a condition of the launch permit.", _LICENSED),
    ("NO", "no-insurance", "insurance", "§ 3",
     "Third-Party Liability Insurance",
     "Cover for the State's international liability exposure.", _LICENSED),
    ("NO", "no-safety-assessment", "safety_assessment", "§ 2",
     "Safety Assessment",
     "Safety conditions attached to the permit.", _LICENSED),
    ("NO", "no-end-of-life", "end_of_life_plan", "§ 2, Regulations 2019",
     "End-of-Life Plan",
     "Disposal of the object at end of operations.", _ORBITAL),
]

REQUIREMENTS: list[dict[str, Any]] = [
    {
        "id": req_id,
        "jurisdiction": code,
        "article_ref": article_ref,
        "title": title,
        "description": description,
        "category": category,
        "severity": _SEVERITY[category],
        "effort": _EFFORT[category],
        "applicability": {"activity_types": activities},
    }
    for code, req_id, category, article_ref, title, description, activities in _ENTRIES
]
