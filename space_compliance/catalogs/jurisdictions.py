"""
National licensing regimes of the priority jurisdictions.

processing_months — typical time to licence
insurance_min_meur — minimum third-party liability cover (million EUR)
complexity — 1 (streamlined) to 5 (very complex)
eu_alignment — 0-100 closeness to the EU Space Act
covered_activities — activities the law licenses (absent = all of them)
"""

from __future__ import annotations

from typing import Any

EU_MEMBER_STATES: frozenset[str] = frozenset({
    "AT", "BE", "BG", "HR", "CY", "CZ", "DK", "EE", "FI", "FR", "DE", "GR", "HU",
    "IE", "IT", "LV", "LT", "LU", "MT", "NL", "PL", "PT", "RO", "SK", "SI", "ES", "SE",
})

# Accepted as "established somewhere in the Union"
EU_MARKER = "EU"

JURISDICTIONS: list[dict[str, Any]] = [
    {
        "code": "FR",
        "name": "France",
        "law_name": "French Space Operations Act (LOS 2008)",
        "authority": "Centre National d'Études Spatiales",
        "processing_months": 6,
        "english_process": False,
        "insurance_min_meur": 60,
        "complexity": 4,
        "newspace_friendly": True,
        "eu_alignment": 85,
        "year_enacted": 2008,
    },
    {
        "code": "UK",
        "name": "United Kingdom",
        "law_name": "Space Industry Act 2018 / Outer Space Act 1986",
        "authority": "Civil Aviation Authority",
        "processing_months": 4,
        "english_process": True,
        "insurance_min_meur": 60,
        "complexity": 3,
        "newspace_friendly": True,
        "eu_alignment": 60,
        "year_enacted": 2018,
    },
    {
        "code": "DE",
        "name": "Germany",
        "law_name": "Satellite Data Security Act (SatDSiG) / Weltraumgesetz (draft)",
        "authority": "German Aerospace Center (DLR)",
        "processing_months": 8,
        "english_process": False,
        "insurance_min_meur": 50,
        "complexity": 4,
        "newspace_friendly": False,
        "eu_alignment": 90,
        "year_enacted": 2007,
        "mandatory_insurance": False,
        "covered_activities": ["data-provider"],
        "coverage_note": (
            "Germany currently has no comprehensive national space law. Only remote "
            "sensing data distribution requires licensing under the SatDSiG. A "
            "Weltraumgesetz has been discussed but not yet enacted. The EU Space Act "
            "(2030) will fill this gap."
        ),
    },
    {
        "code": "LU",
        "name": "Luxembourg",
        "law_name": "Space Activities Act 2020 / Space Resources Act 2017",
        "authority": "Luxembourg Space Agency",
        "processing_months": 3,
        "english_process": True,
        "insurance_min_meur": 20,
        "complexity": 2,
        "newspace_friendly": True,
        "eu_alignment": 95,
        "year_enacted": 2020,
    },
    {
        "code": "NL",
        "name": "Netherlands",
        "law_name": "Space Activities Act",
        "authority": "Netherlands Space Office",
        "processing_months": 5,
        "english_process": True,
        "insurance_min_meur": 50,
        "complexity": 3,
        "newspace_friendly": True,
        "eu_alignment": 88,
        "year_enacted": 2007,
    },
    {
        "code": "BE",
        "name": "Belgium",
        "law_name": "Belgian Space Act",
        "authority": "Belgian Science Policy Office (BELSPO)",
        "processing_months": 6,
        "english_process": False,
        "insurance_min_meur": 40,
        "complexity": 3,
        "newspace_friendly": True,
        "eu_alignment": 85,
        "year_enacted": 2005,
    },
    {
        "code": "AT",
        "name": "Austria",
        "law_name": "Austrian Outer Space Act",
        "authority": "Federal Ministry for Climate Action (BMK)",
        "processing_months": 4,
        "english_process": False,
        "insurance_min_meur": 30,
        "complexity": 2,
        "newspace_friendly": True,
        "eu_alignment": 90,
        "year_enacted": 2011,
    },
    {
        "code": "DK",
        "name": "Denmark",
        "law_name": "Danish Outer Space Act",
        "authority": "Danish Agency for Higher Education and Science",
        "processing_months": 5,
        "english_process": True,
        "insurance_min_meur": 40,
        "complexity": 3,
        "newspace_friendly": True,
        "eu_alignment": 85,
        "year_enacted": 2016,
    },
    {
        "code": "IT",
        "name": "Italy",
        "law_name": "Legge sull'Economia dello Spazio",
        "authority": "Agenzia Spaziale Italiana",
        "processing_months": 9,
        "english_process": False,
        "insurance_min_meur": 50,
        "complexity": 4,
        "newspace_friendly": False,
        "eu_alignment": 80,
        "year_enacted": 2018,
    },
    {
        "code": "NO",
        "name": "Norway",
        "law_name": "Act on Launching Objects from Norwegian Territory into Outer Space",
        "authority": "Norwegian Space Agency",
        "processing_months": 4,
        "english_process": True,
        "insurance_min_meur": 30,
        "complexity": 2,
        "newspace_friendly": True,
        "eu_alignment": 75,
        "year_enacted": 1969,
    },
]


def is_eu_established(country: str | None) -> bool:
    return country is not None and (country == EU_MARKER or country in EU_MEMBER_STATES)
