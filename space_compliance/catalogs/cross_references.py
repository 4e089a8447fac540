"""
Cross-reference table: national space laws, US regimes and NIS2 mapped onto
EU Space Act articles. Rows are informational and never affect scores.
"""

from __future__ import annotations

from typing import Any

from .jurisdictions import EU_MARKER, EU_MEMBER_STATES

_EU_COUNTRIES = sorted(EU_MEMBER_STATES) + [EU_MARKER]

# ── National space laws ──────────────────────────────────

NATIONAL_MAPPINGS: list[dict[str, Any]] = [
    {
        "id": "xref-fr-los",
        "source_framework": "national",
        "source_name": "French Space Operations Act (LOS)",
        "source_area": "Authorization",
        "target_articles": ["Art. 6-14"],
        "relationship": "complementary",
        "rationale": "LOS provisions largely align with the EU Space Act; the French "
                     "government indemnification scheme is expected to continue alongside it.",
        "transition_notes": "CNES is expected to act as competent national authority; existing "
                            "LOS licences are expected to be recognised during transition.",
        "countries": ["FR"],
    },
    {
        "id": "xref-uk-sia",
        "source_framework": "national",
        "source_name": "UK Space Industry Act 2018",
        "source_area": "Authorization / third-country access",
        "target_articles": ["Art. 14", "Art. 6-12"],
        "relationship": "parallel",
        "rationale": "UK law operates independently; UK-licensed operators serving the EU "
                     "market need a separate EU authorization as third-country operators.",
        "transition_notes": "Plan for dual licensing; no mutual recognition framework exists.",
        "countries": ["UK"],
    },
    {
        "id": "xref-be-space-act",
        "source_framework": "national",
        "source_name": "Belgian Space Act",
        "source_area": "Authorization and debris mitigation",
        "target_articles": ["Art. 6-27", "Art. 55-73"],
        "relationship": "superseded",
        "rationale": "The EU Space Act significantly expands the concise Belgian framework "
                     "with detailed debris, cybersecurity and environmental requirements.",
        "transition_notes": "Existing authorizations are likely to be grandfathered.",
        "countries": ["BE"],
    },
    {
        "id": "xref-nl-space-act",
        "source_framework": "national",
        "source_name": "Dutch Space Activities Act",
        "source_area": "Authorization and debris mitigation",
        "target_articles": ["Art. 6-12", "Art. 55-73"],
        "relationship": "superseded",
        "rationale": "The Dutch act will be largely superseded by the harmonised EU framework.",
        "transition_notes": "Smooth transition expected given alignment with international "
                            "standards.",
        "countries": ["NL"],
    },
    {
        "id": "xref-lu-space-act",
        "source_framework": "national",
        "source_name": "Luxembourg Space Activities Act 2020",
        "source_area": "Authorization (space resources stay national)",
        "target_articles": ["Art. 6-12"],
        "relationship": "parallel",
        "rationale": "General authorization provisions move to the EU framework; the Space "
                     "Resources Act has no EU equivalent and continues independently.",
        "transition_notes": "Luxembourg Space Agency expected to be designated authority.",
        "countries": ["LU"],
    },
    {
        "id": "xref-at-space-act",
        "source_framework": "national",
        "source_name": "Austrian Outer Space Act",
        "source_area": "Authorization and debris mitigation",
        "target_articles": ["Art. 6-12", "Art. 55-73"],
        "relationship": "superseded",
        "rationale": "Austrian law will be harmonised; its unlimited liability regime is more "
                     "burdensome than the EU approach.",
        "transition_notes": "Liability regime may be reformed to align with the EU provisions.",
        "countries": ["AT"],
    },
    {
        "id": "xref-dk-space-act",
        "source_framework": "national",
        "source_name": "Danish Outer Space Act",
        "source_area": "Authorization and debris mitigation",
        "target_articles": ["Art. 6-12", "Art. 55-73"],
        "relationship": "superseded",
        "rationale": "The EU Space Act provides a more comprehensive framework than the Nordic "
                     "model, notably for debris, cybersecurity and environment.",
        "transition_notes": "A successor competent authority is expected to be designated.",
        "countries": ["DK"],
    },
    {
        "id": "xref-de-gap",
        "source_framework": "national",
        "source_name": "German space legislation (SatDSiG)",
        "source_area": "No comprehensive national space law",
        "target_articles": ["Art. 6-27", "Art. 55-73", "Art. 74-95", "Art. 96-100"],
        "relationship": "gap",
        "rationale": "Germany lacks a comprehensive space law; the EU Space Act provides the "
                     "first authorization framework for most German operators.",
        "transition_notes": "A national competent authority still has to be designated.",
        "countries": ["DE"],
    },
    {
        "id": "xref-it-space-law",
        "source_framework": "national",
        "source_name": "Italian Space Economy Law",
        "source_area": "Authorization, debris and cybersecurity",
        "target_articles": ["Art. 6-27", "Art. 55-73", "Art. 74-95"],
        "relationship": "superseded",
        "rationale": "The recent Italian framework is still maturing; the EU Space Act adds "
                     "detailed debris, cybersecurity and environmental requirements.",
        "transition_notes": "ASI expected to be designated as competent authority.",
        "countries": ["IT"],
    },
    {
        "id": "xref-no-space-act",
        "source_framework": "national",
        "source_name": "Norwegian Space Act",
        "source_area": "Third-country access (EEA)",
        "target_articles": ["Art. 14"],
        "relationship": "parallel",
        "rationale": "Norway is an EEA state; applicability depends on EEA incorporation and "
                     "Norwegian operators may need a separate EU authorization.",
        "transition_notes": "Depends on whether the regulation is deemed EEA-relevant.",
        "countries": ["NO"],
    },
]

# ── US regimes ───────────────────────────────────────────

US_MAPPINGS: list[dict[str, Any]] = [
    {
        "id": "xref-us-fcc-license",
        "source_framework": "us",
        "source_name": "FCC Part 25 space station licence",
        "source_area": "Authorization",
        "target_articles": ["Art. 4-8"],
        "relationship": "complementary",
        "rationale": "Both require prior authorization; the FCC licence centres on spectrum "
                     "while the EU scope covers the full mission.",
        "countries": ["US"],
    },
    {
        "id": "xref-us-fcc-5yr",
        "source_framework": "us",
        "source_name": "FCC 5-year deorbit rule",
        "source_area": "Post-mission disposal",
        "target_articles": ["Art. 72"],
        "relationship": "parallel",
        "rationale": "The FCC requires LEO disposal within five years; EU disposal timelines "
                     "differ, so both must be satisfied independently.",
        "countries": ["US"],
    },
    {
        "id": "xref-us-fcc-odm",
        "source_framework": "us",
        "source_name": "FCC orbital debris mitigation showing",
        "source_area": "Debris mitigation plan",
        "target_articles": ["Art. 67"],
        "relationship": "superseded",
        "rationale": "An FCC debris showing covers most of the EU debris mitigation plan "
                     "content and can be reused.",
        "countries": ["US"],
    },
    {
        "id": "xref-us-faa-450",
        "source_framework": "us",
        "source_name": "FAA 14 CFR Part 450",
        "source_area": "Launch and re-entry licensing",
        "target_articles": ["Art. 4-6", "Art. 20"],
        "relationship": "complementary",
        "rationale": "Launch licensing overlaps partially; EU rules add operator-level "
                     "obligations beyond flight safety.",
        "countries": ["US"],
    },
    {
        "id": "xref-us-faa-440",
        "source_framework": "us",
        "source_name": "FAA 14 CFR Part 440 financial responsibility",
        "source_area": "Insurance",
        "target_articles": ["Art. 28-32"],
        "relationship": "complementary",
        "rationale": "Both mandate third-party liability cover with differing amount "
                     "methodologies.",
        "countries": ["US"],
    },
    {
        "id": "xref-us-noaa-960",
        "source_framework": "us",
        "source_name": "NOAA 15 CFR Part 960",
        "source_area": "Remote sensing licensing",
        "target_articles": ["Art. 16-19"],
        "relationship": "complementary",
        "rationale": "Remote sensing licences address data policy that the EU framework "
                     "covers only partially.",
        "countries": ["US"],
    },
]

# ── NIS2 onto EU Space Act cybersecurity ─────────────────

NIS2_MAPPINGS: list[dict[str, Any]] = [
    {
        "id": "xref-nis2-risk",
        "source_framework": "nis2",
        "source_name": "NIS2 Art. 21(1)-(2)(a)",
        "source_area": "Risk management and security policies",
        "target_articles": ["Art. 74", "Art. 76-77"],
        "relationship": "complementary",
        "rationale": "EU Space Act cybersecurity policy and risk assessment specialise the "
                     "NIS2 risk-management duties for space systems.",
        "countries": _EU_COUNTRIES,
    },
    {
        "id": "xref-nis2-crypto",
        "source_framework": "nis2",
        "source_name": "NIS2 Art. 21(2)(h)-(j)",
        "source_area": "Cryptography, access control and MFA",
        "target_articles": ["Art. 78", "Art. 79-80"],
        "relationship": "complementary",
        "rationale": "Link encryption and access control obligations satisfy the NIS2 "
                     "cryptography and access measures for the space segment.",
        "countries": _EU_COUNTRIES,
    },
    {
        "id": "xref-nis2-supply",
        "source_framework": "nis2",
        "source_name": "NIS2 Art. 21(2)(d)",
        "source_area": "Supply chain security",
        "target_articles": ["Art. 83"],
        "relationship": "parallel",
        "rationale": "Both require supplier security assessment; one assessment can serve both.",
        "countries": _EU_COUNTRIES,
    },
    {
        "id": "xref-nis2-vuln",
        "source_framework": "nis2",
        "source_name": "NIS2 Art. 21(2)(e)-(f)",
        "source_area": "Vulnerability handling and testing",
        "target_articles": ["Art. 85"],
        "relationship": "parallel",
        "rationale": "Vulnerability management and testing duties overlap closely.",
        "countries": _EU_COUNTRIES,
    },
    {
        "id": "xref-nis2-reporting",
        "source_framework": "nis2",
        "source_name": "NIS2 Art. 23",
        "source_area": "Incident reporting (24h / 72h / 1 month)",
        "target_articles": ["Art. 89-92"],
        "relationship": "superseded",
        "rationale": "For space operators the sector-specific incident notification regime "
                     "takes precedence as lex specialis.",
        "countries": _EU_COUNTRIES,
    },
]

MAPPINGS: list[dict[str, Any]] = NATIONAL_MAPPINGS + US_MAPPINGS + NIS2_MAPPINGS
