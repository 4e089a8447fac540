"""
EU Space Act requirement catalog.

Declarative entries only; validated into RequirementDefinition models by
catalogs.registry. Category weights mirror the regulation's module split.
"""

from __future__ import annotations

from typing import Any

FRAMEWORK: dict[str, Any] = {
    "framework": "eu_space_act",
    "name": "EU Space Act",
    "category_weights": {
        "authorization": 0.25,   # Art. 6-27
        "debris": 0.20,          # Art. 55-73
        "cybersecurity": 0.20,   # Art. 74-95
        "insurance": 0.15,       # Art. 28-32
        "environmental": 0.10,   # Art. 96-100
        "reporting": 0.10,       # Art. 33-54
    },
    "category_labels": {
        "authorization": "Authorization & Licensing",
        "debris": "Debris Mitigation & Space Safety",
        "cybersecurity": "Cybersecurity & Resilience",
        "insurance": "Insurance & Liability",
        "environmental": "Environmental Footprint",
        "reporting": "Registration & Reporting",
    },
}

_ALL_ORBITS = ["LEO", "MEO", "GEO", "HEO", "SSO", "cislunar"]

REQUIREMENTS: list[dict[str, Any]] = [
    # ── Authorization (Art. 6-27) ────────────────────────
    {
        "id": "eu-auth-001",
        "article_ref": "Art. 6",
        "title": "Authorization to conduct space activities",
        "description": "Obtain prior authorization from the competent national authority "
                       "before conducting any space activity covered by the regulation.",
        "category": "authorization",
        "severity": "critical",
        "effort": "high",
        "evidence_required": ["Authorization application", "Technical dossier"],
        "tips": ["Engage the competent authority early; pre-application meetings shorten review"],
    },
    {
        "id": "eu-auth-002",
        "article_ref": "Art. 7",
        "title": "Technical and operational capability",
        "description": "Demonstrate the technical competence and operational procedures "
                       "needed to carry out the mission safely.",
        "category": "authorization",
        "severity": "major",
        "effort": "medium",
        "evidence_required": ["Mission operations concept", "Staff qualification records"],
    },
    {
        "id": "eu-auth-003",
        "article_ref": "Art. 10",
        "title": "Financial capability",
        "description": "Show sufficient financial resources to complete the mission, "
                       "including end-of-life operations.",
        "category": "authorization",
        "severity": "major",
        "effort": "medium",
        "evidence_required": ["Audited financial statements", "Mission budget"],
    },
    {
        "id": "eu-auth-004",
        "article_ref": "Art. 14",
        "title": "Third-country operator registration",
        "description": "Operators established outside the Union that provide services in the "
                       "Union must register and designate a legal representative.",
        "category": "authorization",
        "applicability": {"activity_types": ["third-country-operator"]},
        "severity": "critical",
        "effort": "medium",
        "evidence_required": ["Representative mandate", "Registration form"],
    },
    {
        "id": "eu-auth-005",
        "article_ref": "Art. 20",
        "title": "Launch and launch site authorization",
        "description": "Launch services and launch site operations require a dedicated "
                       "authorization covering range safety and flight termination.",
        "category": "authorization",
        "applicability": {"activity_types": ["launch-operator", "launch-site-operator"]},
        "severity": "critical",
        "effort": "high",
        "evidence_required": ["Flight safety analysis", "Range safety plan"],
    },
    {
        "id": "eu-auth-006",
        "article_ref": "Art. 22",
        "title": "Notification of material changes",
        "description": "Notify the competent authority of changes affecting the conditions "
                       "of an existing authorization.",
        "category": "authorization",
        "severity": "minor",
        "effort": "low",
        "evidence_required": ["Change notification procedure"],
    },
    {
        "id": "eu-auth-007",
        "article_ref": "Art. 24",
        "title": "Registration in the Union Register of Space Objects",
        "description": "Register each spacecraft with the Union Register of Space Objects.",
        "category": "authorization",
        "applicability": {"activity_types": ["spacecraft-operator"]},
        "severity": "major",
        "effort": "low",
        "evidence_required": ["Registration data sheet"],
    },
    {
        "id": "eu-auth-008",
        "article_ref": "Art. 26",
        "title": "In-space operations and servicing authorization",
        "description": "Rendezvous, proximity and servicing operations require consent of the "
                       "client object operator and a dedicated safety case.",
        "category": "authorization",
        "applicability": {"activity_types": ["in-space-servicer"]},
        "severity": "major",
        "effort": "high",
        "evidence_required": ["Proximity operations safety case", "Client consent agreement"],
    },
    # ── Reporting (Art. 33-54) ───────────────────────────
    {
        "id": "eu-rep-001",
        "article_ref": "Art. 33",
        "title": "Annual compliance report",
        "description": "Submit an annual report on the continued fulfilment of authorization "
                       "conditions.",
        "category": "reporting",
        "severity": "major",
        "effort": "low",
        "evidence_required": ["Annual compliance report"],
    },
    {
        "id": "eu-rep-002",
        "article_ref": "Art. 36",
        "title": "Close-approach and collision event reporting",
        "description": "Report conjunction events, collisions and anomalies affecting other "
                       "space objects without delay.",
        "category": "reporting",
        "applicability": {"orbit_types": ["LEO", "MEO", "GEO", "HEO", "SSO"]},
        "severity": "major",
        "effort": "medium",
        "evidence_required": ["Event reporting procedure"],
    },
    {
        "id": "eu-rep-003",
        "article_ref": "Art. 41",
        "title": "Notification of end-of-life operations",
        "description": "Notify the competent authority before initiating disposal manoeuvres.",
        "category": "reporting",
        "applicability": {"activity_types": ["spacecraft-operator"]},
        "severity": "minor",
        "effort": "low",
        "evidence_required": ["Disposal notification template"],
    },
    {
        "id": "eu-rep-004",
        "article_ref": "Art. 45",
        "title": "Space situational awareness data sharing",
        "description": "Collision avoidance providers share conjunction data with the Union "
                       "SST service under agreed formats.",
        "category": "reporting",
        "applicability": {"activity_types": ["collision-avoidance-provider"]},
        "severity": "minor",
        "effort": "medium",
        "evidence_required": ["Data sharing agreement"],
    },
    # ── Debris mitigation & space safety (Art. 55-73) ───
    {
        "id": "trackability",
        "article_ref": "Art. 63",
        "title": "Trackability of space objects",
        "description": "Ensure each spacecraft can be tracked from the ground, using "
                       "retro-reflectors or transponders where its size requires.",
        "category": "debris",
        "applicability": {"orbit_types": _ALL_ORBITS},
        "severity": "critical",
        "effort": "low",
        "evidence_required": ["Radar cross-section analysis", "Tracking aid specification"],
        "tips": ["Small satellites below 10 cm usually need a tracking aid"],
    },
    {
        "id": "collision_avoidance_service",
        "article_ref": "Art. 64",
        "title": "Subscription to a collision avoidance service",
        "description": "Subscribe to a collision avoidance service and act on its "
                       "conjunction warnings.",
        "category": "debris",
        "applicability": {"orbit_types": ["LEO", "MEO", "GEO"]},
        "severity": "critical",
        "effort": "low",
        "evidence_required": ["Service contract", "Conjunction response procedure"],
        "tips": ["EU SST provides a free baseline service for registered operators"],
    },
    {
        "id": "maneuverability",
        "article_ref": "Art. 66",
        "title": "Manoeuvring capability for collision avoidance",
        "description": "Spacecraft in LEO and MEO must be able to perform collision avoidance "
                       "manoeuvres.",
        "category": "debris",
        "applicability": {"orbit_types": ["LEO", "MEO"], "requires_maneuverability": True},
        "severity": "critical",
        "effort": "high",
        "evidence_required": ["Propulsion subsystem specification", "Manoeuvre planning procedure"],
    },
    {
        "id": "debris_mitigation_plan",
        "article_ref": "Art. 67",
        "title": "Debris mitigation plan",
        "description": "Establish and maintain a space debris mitigation plan covering the "
                       "whole mission life cycle.",
        "category": "debris",
        "applicability": {"orbit_types": _ALL_ORBITS},
        "severity": "critical",
        "effort": "medium",
        "evidence_required": ["Debris mitigation plan", "Casualty risk assessment"],
        "tips": ["Structure the plan along ISO 24113 to ease review"],
        "iso_reference": "ISO 24113:2019",
        "profile_answer": "has_debris_mitigation_plan",
    },
    {
        "id": "fragmentation_avoidance",
        "article_ref": "Art. 67(c)",
        "title": "Avoidance of break-ups and fragmentation",
        "description": "Limit the probability of accidental break-up during operations.",
        "category": "debris",
        "applicability": {"orbit_types": ["LEO", "MEO", "GEO", "HEO", "SSO"]},
        "severity": "major",
        "effort": "medium",
        "evidence_required": ["Break-up risk analysis"],
    },
    {
        "id": "passivation",
        "article_ref": "Art. 67(d)",
        "title": "Passivation at end of life",
        "description": "Deplete stored energy sources at end of mission to prevent explosions.",
        "category": "debris",
        "applicability": {"orbit_types": _ALL_ORBITS},
        "severity": "major",
        "effort": "medium",
        "evidence_required": ["Passivation procedure", "Battery and propellant depletion design"],
        "iso_reference": "ISO 24113:2019 §6.2",
        "profile_answer": "has_passivation_capability",
    },
    {
        "id": "light_pollution",
        "article_ref": "Art. 68",
        "title": "Limitation of light pollution",
        "description": "Constellations of ten or more satellites must limit their brightness "
                       "to protect astronomical observation.",
        "category": "debris",
        "applicability": {
            "orbit_types": ["LEO", "MEO"],
            "constellation_tiers": ["medium", "large", "mega"],
            "min_satellites": 10,
        },
        "severity": "major",
        "effort": "medium",
        "evidence_required": ["Brightness assessment"],
        "tips": ["Dark coatings and attitude management reduce visual magnitude"],
    },
    {
        "id": "large_constellation_management",
        "article_ref": "Art. 69",
        "title": "Large constellation management",
        "description": "Operators of 100 or more satellites must submit a constellation "
                       "management plan including collision risk budgeting.",
        "category": "debris",
        "applicability": {"constellation_tiers": ["large", "mega"], "min_satellites": 100},
        "severity": "critical",
        "effort": "high",
        "evidence_required": ["Constellation management plan"],
    },
    {
        "id": "large_constellation_disposal",
        "article_ref": "Art. 70",
        "title": "Large constellation disposal reliability",
        "description": "Demonstrate a high disposal success probability across the whole "
                       "constellation, with contingency for failed satellites.",
        "category": "debris",
        "applicability": {"constellation_tiers": ["large", "mega"], "min_satellites": 100},
        "severity": "critical",
        "effort": "high",
        "evidence_required": ["Disposal reliability analysis", "Failed-satellite contingency plan"],
    },
    {
        "id": "on_orbit_servicing",
        "article_ref": "Art. 71",
        "title": "Design for removal and servicing",
        "description": "Consider design features that facilitate future servicing or "
                       "active removal.",
        "category": "debris",
        "applicability": {"orbit_types": ["LEO", "MEO", "GEO"]},
        "severity": "minor",
        "effort": "medium",
        "evidence_required": ["Servicing interface description"],
    },
    {
        "id": "end_of_life_leo",
        "article_ref": "Art. 72",
        "title": "End-of-life disposal in LEO",
        "description": "Remove spacecraft from the LEO protected region within the prescribed "
                       "post-mission period.",
        "category": "debris",
        "applicability": {"orbit_types": ["LEO"]},
        "severity": "critical",
        "effort": "high",
        "evidence_required": ["Orbital lifetime analysis", "Disposal plan"],
        "iso_reference": "ISO 24113:2019 §6.3.3",
    },
    {
        "id": "end_of_life_meo",
        "article_ref": "Art. 72",
        "title": "End-of-life disposal in MEO",
        "description": "Move spacecraft to a disposal orbit that avoids navigation "
                       "constellation altitudes.",
        "category": "debris",
        "applicability": {"orbit_types": ["MEO"]},
        "severity": "critical",
        "effort": "high",
        "evidence_required": ["Disposal orbit analysis"],
    },
    {
        "id": "end_of_life_geo",
        "article_ref": "Art. 72",
        "title": "End-of-life re-orbiting from GEO",
        "description": "Re-orbit spacecraft to a graveyard orbit above the GEO protected region.",
        "category": "debris",
        "applicability": {"orbit_types": ["GEO"]},
        "severity": "critical",
        "effort": "high",
        "evidence_required": ["Graveyard manoeuvre plan", "Propellant budget"],
        "iso_reference": "ISO 24113:2019 §6.3.2",
    },
    {
        "id": "supply_chain_compliance",
        "article_ref": "Art. 73",
        "title": "Supply chain flow-down of safety requirements",
        "description": "Flow down debris and safety obligations to suppliers and "
                       "subcontractors.",
        "category": "debris",
        "severity": "minor",
        "effort": "low",
        "evidence_required": ["Supplier contract clauses"],
    },
    # ── Cybersecurity (Art. 74-95) ───────────────────────
    {
        "id": "eu-cyber-001",
        "article_ref": "Art. 74",
        "title": "Cybersecurity risk management policy",
        "description": "Adopt a documented cybersecurity policy covering ground, link and "
                       "space segments.",
        "category": "cybersecurity",
        "severity": "critical",
        "effort": "medium",
        "evidence_required": ["Information security policy"],
        "profile_answer": "cybersecurity.has_cybersecurity_policy",
    },
    {
        "id": "eu-cyber-002",
        "article_ref": "Art. 76-77",
        "title": "Cybersecurity risk assessment",
        "description": "Perform and update a risk assessment for the full mission architecture.",
        "category": "cybersecurity",
        "severity": "major",
        "effort": "medium",
        "evidence_required": ["Risk register", "Threat model"],
        "profile_answer": "cybersecurity.has_risk_management",
    },
    {
        "id": "eu-cyber-003",
        "article_ref": "Art. 78",
        "title": "Encryption of command and telemetry links",
        "description": "Protect telecommand and telemetry links with authenticated encryption.",
        "category": "cybersecurity",
        "severity": "critical",
        "effort": "high",
        "evidence_required": ["Link security specification"],
        "profile_answer": "cybersecurity.has_encryption",
    },
    {
        "id": "eu-cyber-004",
        "article_ref": "Art. 79-80",
        "title": "Access control and authentication",
        "description": "Restrict access to mission control systems with strong authentication.",
        "category": "cybersecurity",
        "severity": "major",
        "effort": "medium",
        "evidence_required": ["Access control policy", "Privileged access review"],
        "profile_answer": "cybersecurity.has_access_control",
    },
    {
        "id": "eu-cyber-005",
        "article_ref": "Art. 83",
        "title": "Supply chain cybersecurity",
        "description": "Assess the security practices of suppliers of critical components and "
                       "services.",
        "category": "cybersecurity",
        "severity": "major",
        "effort": "medium",
        "evidence_required": ["Supplier security assessments"],
        "profile_answer": "cybersecurity.has_supply_chain_security",
    },
    {
        "id": "eu-cyber-006",
        "article_ref": "Art. 85",
        "title": "Vulnerability management and security testing",
        "description": "Track, remediate and test for vulnerabilities across mission systems.",
        "category": "cybersecurity",
        "severity": "major",
        "effort": "medium",
        "evidence_required": ["Vulnerability management procedure", "Penetration test report"],
        "profile_answer": "cybersecurity.has_vulnerability_management",
    },
    {
        "id": "eu-cyber-007",
        "article_ref": "Art. 89-92",
        "title": "Cybersecurity incident notification",
        "description": "Notify significant incidents to the competent authority within the "
                       "prescribed deadlines.",
        "category": "cybersecurity",
        "severity": "critical",
        "effort": "medium",
        "evidence_required": ["Incident response plan", "Notification templates"],
        "profile_answer": "cybersecurity.has_incident_response_plan",
    },
    # ── Insurance (Art. 28-32) ───────────────────────────
    {
        "id": "eu-ins-001",
        "article_ref": "Art. 28",
        "title": "Third-party liability insurance",
        "description": "Hold third-party liability insurance covering damage caused by the "
                       "space activity.",
        "category": "insurance",
        "severity": "critical",
        "effort": "medium",
        "evidence_required": ["Insurance certificate"],
    },
    {
        "id": "eu-ins-002",
        "article_ref": "Art. 29",
        "title": "Minimum insured amount",
        "description": "Cover at least the minimum amount set for the mission's risk profile.",
        "category": "insurance",
        "severity": "major",
        "effort": "low",
        "evidence_required": ["Coverage calculation"],
    },
    {
        "id": "eu-ins-003",
        "article_ref": "Art. 31",
        "title": "Launch phase insurance",
        "description": "Launch operators insure the launch phase, including third-party "
                       "damage on the ground.",
        "category": "insurance",
        "applicability": {"activity_types": ["launch-operator"]},
        "severity": "critical",
        "effort": "medium",
        "evidence_required": ["Launch insurance policy"],
    },
    {
        "id": "eu-ins-004",
        "article_ref": "Art. 32",
        "title": "Maintenance of insurance evidence",
        "description": "Keep proof of insurance valid for the full authorization period.",
        "category": "insurance",
        "severity": "minor",
        "effort": "low",
        "evidence_required": ["Renewal schedule"],
    },
    # ── Environmental footprint (Art. 96-100) ────────────
    {
        "id": "eu-env-001",
        "article_ref": "Art. 96",
        "title": "Environmental footprint declaration",
        "description": "Declare the environmental footprint of the mission using the Union "
                       "methodology.",
        "category": "environmental",
        "severity": "major",
        "effort": "medium",
        "evidence_required": ["Environmental footprint declaration"],
    },
    {
        "id": "eu-env-002",
        "article_ref": "Art. 97",
        "title": "Life-cycle assessment",
        "description": "Base the footprint declaration on a life-cycle assessment of the "
                       "space and ground segments.",
        "category": "environmental",
        "severity": "minor",
        "effort": "high",
        "evidence_required": ["Life-cycle assessment report"],
    },
    {
        "id": "eu-env-003",
        "article_ref": "Art. 99",
        "title": "Launch environmental impact",
        "description": "Assess atmospheric and local environmental impacts of launch "
                       "operations.",
        "category": "environmental",
        "applicability": {"activity_types": ["launch-operator", "launch-site-operator"]},
        "severity": "major",
        "effort": "high",
        "evidence_required": ["Launch environmental impact assessment"],
    },
]

# Statutory milestones shown with every applicable assessment
KEY_DEADLINES: list[dict[str, str]] = [
    {"date": "2027-01-01", "description": "EU Space Act entry into force"},
    {"date": "2030-01-01", "description": "Full compliance required for existing operators"},
]

# Environmental footprint declaration deadline per regime
EFD_DEADLINES: dict[str, dict[str, str]] = {
    "light": {"date": "2032-01-01", "description": "EFD deadline for Light Regime"},
    "standard": {"date": "2030-01-01", "description": "EFD compliance deadline"},
}
