"""
NIS2 Directive requirement catalog for space-sector entities.

Space is an Annex I sector, so every obligation applies once the entity is
in scope; scope itself is decided by the aggregator's gate.
"""

from __future__ import annotations

from typing import Any

FRAMEWORK: dict[str, Any] = {
    "framework": "nis2",
    "name": "NIS2 Directive",
    "category_weights": {
        "governance": 0.10,
        "risk_management": 0.20,
        "incident_handling": 0.15,
        "business_continuity": 0.10,
        "supply_chain": 0.10,
        "access_cryptography": 0.15,
        "hygiene_training": 0.10,
        "reporting": 0.10,
    },
    "category_labels": {
        "governance": "Governance & Accountability",
        "risk_management": "Risk Analysis & Security Policies",
        "incident_handling": "Incident Handling",
        "business_continuity": "Business Continuity & Crisis Management",
        "supply_chain": "Supply Chain Security",
        "access_cryptography": "Access Control & Cryptography",
        "hygiene_training": "Cyber Hygiene & Training",
        "reporting": "Reporting & Registration",
    },
}

REQUIREMENTS: list[dict[str, Any]] = [
    # ── Governance (Art. 20) ─────────────────────────────
    {
        "id": "nis2-001",
        "article_ref": "NIS2 Art. 20(1)",
        "title": "Management body approval of risk-management measures",
        "description": "The management body approves the cybersecurity risk-management "
                       "measures and oversees their implementation.",
        "category": "governance",
        "severity": "critical",
        "effort": "low",
        "evidence_required": ["Board resolution", "Oversight reporting schedule"],
    },
    {
        "id": "nis2-002",
        "article_ref": "NIS2 Art. 20(2)",
        "title": "Cybersecurity training for management",
        "description": "Members of the management body follow training to identify risks "
                       "and assess cybersecurity practices.",
        "category": "governance",
        "severity": "major",
        "effort": "low",
        "evidence_required": ["Training attendance records"],
    },
    {
        "id": "nis2-003",
        "article_ref": "NIS2 Art. 21(2)(a)",
        "title": "Information system security policy",
        "description": "Adopt policies on risk analysis and information system security.",
        "category": "governance",
        "severity": "critical",
        "effort": "medium",
        "evidence_required": ["Information security policy"],
        "profile_answer": "cybersecurity.has_cybersecurity_policy",
    },
    # ── Risk management (Art. 21) ────────────────────────
    {
        "id": "nis2-004",
        "article_ref": "NIS2 Art. 21(1)",
        "title": "Cybersecurity risk-management measures",
        "description": "Take appropriate and proportionate technical, operational and "
                       "organisational measures to manage risks to network and information "
                       "systems, including ground segment and satellite links.",
        "category": "risk_management",
        "severity": "critical",
        "effort": "high",
        "evidence_required": ["Risk register", "Treatment plan"],
        "profile_answer": "cybersecurity.has_risk_management",
    },
    {
        "id": "nis2-005",
        "article_ref": "NIS2 Art. 21(2)(a)",
        "title": "Risk analysis methodology",
        "description": "Apply a repeatable all-hazards risk analysis covering space, ground "
                       "and user segments.",
        "category": "risk_management",
        "severity": "major",
        "effort": "medium",
        "evidence_required": ["Risk methodology document"],
    },
    {
        "id": "nis2-006",
        "article_ref": "NIS2 Art. 21(2)(e)",
        "title": "Vulnerability handling and disclosure",
        "description": "Handle and disclose vulnerabilities in acquired and developed systems.",
        "category": "risk_management",
        "severity": "major",
        "effort": "medium",
        "evidence_required": ["Vulnerability management procedure"],
        "profile_answer": "cybersecurity.has_vulnerability_management",
    },
    {
        "id": "nis2-007",
        "article_ref": "NIS2 Art. 21(2)(f)",
        "title": "Assessment of measure effectiveness",
        "description": "Test and audit the effectiveness of cybersecurity measures, "
                       "including penetration testing.",
        "category": "risk_management",
        "severity": "major",
        "effort": "medium",
        "evidence_required": ["Penetration test report", "Internal audit report"],
        "profile_answer": "cybersecurity.has_penetration_testing",
    },
    # ── Incident handling ────────────────────────────────
    {
        "id": "nis2-008",
        "article_ref": "NIS2 Art. 21(2)(b)",
        "title": "Incident handling procedures",
        "description": "Maintain procedures to prevent, detect, analyse, contain and respond "
                       "to incidents.",
        "category": "incident_handling",
        "severity": "critical",
        "effort": "medium",
        "evidence_required": ["Incident response plan"],
        "profile_answer": "cybersecurity.has_incident_response_plan",
    },
    {
        "id": "nis2-009",
        "article_ref": "NIS2 Art. 21(2)(b)",
        "title": "Security monitoring and detection",
        "description": "Monitor ground stations and mission control networks for anomalous "
                       "activity.",
        "category": "incident_handling",
        "severity": "major",
        "effort": "high",
        "evidence_required": ["Monitoring architecture", "Alert triage procedure"],
    },
    # ── Business continuity ──────────────────────────────
    {
        "id": "nis2-010",
        "article_ref": "NIS2 Art. 21(2)(c)",
        "title": "Business continuity and crisis management",
        "description": "Ensure continuity of operations, including backup ground stations "
                       "and crisis management.",
        "category": "business_continuity",
        "severity": "critical",
        "effort": "high",
        "evidence_required": ["Business continuity plan", "Crisis management plan"],
        "profile_answer": "cybersecurity.has_business_continuity_plan",
    },
    {
        "id": "nis2-011",
        "article_ref": "NIS2 Art. 21(2)(c)",
        "title": "Backup management and disaster recovery",
        "description": "Maintain tested backups and recovery procedures for mission-critical "
                       "systems.",
        "category": "business_continuity",
        "severity": "major",
        "effort": "medium",
        "evidence_required": ["Backup policy", "Recovery test results"],
    },
    # ── Supply chain ─────────────────────────────────────
    {
        "id": "nis2-012",
        "article_ref": "NIS2 Art. 21(2)(d)",
        "title": "Supply chain security",
        "description": "Address security in relationships with direct suppliers and service "
                       "providers.",
        "category": "supply_chain",
        "severity": "critical",
        "effort": "medium",
        "evidence_required": ["Supplier security assessments", "Contract security clauses"],
        "profile_answer": "cybersecurity.has_supply_chain_security",
    },
    {
        "id": "nis2-013",
        "article_ref": "NIS2 Art. 21(2)(e)",
        "title": "Security in acquisition, development and maintenance",
        "description": "Apply security requirements when acquiring, developing and "
                       "maintaining network and information systems.",
        "category": "supply_chain",
        "severity": "major",
        "effort": "medium",
        "evidence_required": ["Secure development lifecycle"],
    },
    # ── Access control & cryptography ────────────────────
    {
        "id": "nis2-014",
        "article_ref": "NIS2 Art. 21(2)(h)",
        "title": "Cryptography and encryption policy",
        "description": "Define policies for the use of cryptography and, where appropriate, "
                       "encryption.",
        "category": "access_cryptography",
        "severity": "major",
        "effort": "medium",
        "evidence_required": ["Cryptography policy", "Key management procedure"],
        "profile_answer": "cybersecurity.has_encryption",
    },
    {
        "id": "nis2-015",
        "article_ref": "NIS2 Art. 21(2)(i)",
        "title": "Access control and asset management",
        "description": "Apply human resources security, access control policies and asset "
                       "management.",
        "category": "access_cryptography",
        "severity": "major",
        "effort": "medium",
        "evidence_required": ["Access control policy", "Asset inventory"],
        "profile_answer": "cybersecurity.has_access_control",
    },
    {
        "id": "nis2-016",
        "article_ref": "NIS2 Art. 21(2)(j)",
        "title": "Multi-factor authentication",
        "description": "Use multi-factor or continuous authentication and secured "
                       "communications where appropriate.",
        "category": "access_cryptography",
        "severity": "major",
        "effort": "low",
        "evidence_required": ["MFA coverage report"],
    },
    # ── Cyber hygiene & training ─────────────────────────
    {
        "id": "nis2-017",
        "article_ref": "NIS2 Art. 21(2)(g)",
        "title": "Cyber hygiene and security awareness training",
        "description": "Implement basic cyber hygiene practices and regular cybersecurity "
                       "training for staff.",
        "category": "hygiene_training",
        "severity": "major",
        "effort": "low",
        "evidence_required": ["Training programme", "Completion records"],
        "profile_answer": "cybersecurity.has_security_training",
    },
    # ── Reporting & registration (Art. 3, 23, 27) ────────
    {
        "id": "nis2-018",
        "article_ref": "NIS2 Art. 23(4)(a)",
        "title": "Early warning within 24 hours",
        "description": "Submit an early warning to the CSIRT or competent authority within "
                       "24 hours of becoming aware of a significant incident.",
        "category": "reporting",
        "severity": "critical",
        "effort": "low",
        "evidence_required": ["Early warning template", "On-call escalation roster"],
    },
    {
        "id": "nis2-019",
        "article_ref": "NIS2 Art. 23(4)(b)",
        "title": "Incident notification within 72 hours",
        "description": "Submit an incident notification with an initial assessment within "
                       "72 hours.",
        "category": "reporting",
        "severity": "critical",
        "effort": "low",
        "evidence_required": ["Incident notification template"],
    },
    {
        "id": "nis2-020",
        "article_ref": "NIS2 Art. 23(4)(d)",
        "title": "Final incident report within one month",
        "description": "Provide a final report describing root cause and mitigation within "
                       "one month of the notification.",
        "category": "reporting",
        "severity": "major",
        "effort": "low",
        "evidence_required": ["Final report template"],
    },
    {
        "id": "nis2-021",
        "article_ref": "NIS2 Art. 27",
        "title": "Registration with the competent authority",
        "description": "Register entity details, sector and contact points with the "
                       "national competent authority.",
        "category": "reporting",
        "severity": "minor",
        "effort": "low",
        "evidence_required": ["Registration confirmation"],
    },
    {
        "id": "nis2-022",
        "article_ref": "NIS2 Art. 29",
        "title": "Cybersecurity information sharing",
        "description": "Participate in information-sharing arrangements on threats and "
                       "vulnerabilities.",
        "category": "reporting",
        "severity": "minor",
        "effort": "low",
        "evidence_required": ["Information sharing agreement"],
    },
]

# Maximum administrative fines (Art. 34), by entity classification
PENALTIES: dict[str, str] = {
    "essential": "Up to €10,000,000 or 2% of total annual worldwide turnover "
                 "(whichever is higher)",
    "important": "Up to €7,000,000 or 1.4% of total annual worldwide turnover "
                 "(whichever is higher)",
}

# Significant-incident reporting stages (Art. 23(4))
INCIDENT_REPORTING: list[dict[str, str]] = [
    {
        "stage": "early_warning",
        "deadline": "24 hours",
        "description": "Early warning to the CSIRT or competent authority within 24 hours "
                       "of becoming aware of the incident, stating whether it may be "
                       "malicious or have cross-border impact.",
    },
    {
        "stage": "notification",
        "deadline": "72 hours",
        "description": "Incident notification updating the early warning with an initial "
                       "assessment of severity and impact, and indicators of compromise "
                       "where available.",
    },
    {
        "stage": "intermediate_report",
        "deadline": "Upon request",
        "description": "Status update when the CSIRT or competent authority asks for one.",
    },
    {
        "stage": "final_report",
        "deadline": "1 month",
        "description": "Final report no later than one month after the notification: "
                       "description, root cause, mitigation and any cross-border impact.",
    },
]

SUPERVISORY_AUTHORITIES: dict[str, str] = {
    "single": "National competent authority of your member state of establishment.",
    "multiple": "Primary: member state of main establishment (Art. 26(1)). Additional: "
                "coordination with the authorities of the other member states you operate in.",
    "representative": "Competent authority of the member state where your EU "
                      "representative is established (Art. 26(3)).",
}
