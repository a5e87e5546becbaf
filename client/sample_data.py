# client/sample_data.py
# Canned conversation and update feed for the "Sample data" toggle.

SAMPLE_QUESTIONS = [
    "What are the consent requirements under DPDPA?",
    "How does IT Act 2008 amend IT Act 2000?",
    "What are the penalties for a personal data breach?",
    "Compare penalties under DPDPA and IT Act 2000",
]

SAMPLE_MESSAGES = [
    {"role": "user", "content": "What are the consent requirements under DPDPA?"},
    {
        "role": "assistant",
        "frameworks": ["DPDPA"],
        "answer": {
            "answer": (
                "Under the **Digital Personal Data Protection Act (DPDPA) 2023**, consent must be "
                "**free, specific, informed, unconditional and unambiguous**, given by a clear "
                "affirmative action.\n\n"
                "- Notice in clear and plain language before consent is obtained\n"
                "- Consent can be withdrawn as easily as it was given\n"
                "- Children's data needs verifiable parental consent"
            ),
            "sources": [
                {"act": "DPDPA 2023", "section": "Section 6", "description": "Consent as a basis for processing personal data"},
                {"act": "DPDPA 2023", "section": "Section 5", "description": "Notice requirements for data processing"},
                {"act": "DPDPA 2023", "section": "Section 9", "description": "Processing of children's personal data"},
            ],
            "cross_framework_analysis": (
                "The IT Act 2000 (Section 43A with the 2011 SPDI Rules) only required consent for "
                "sensitive personal data; DPDPA covers all digital personal data."
            ),
            "precedence_notes": "Section 38 of DPDPA: its provisions apply in addition to, and prevail over, conflicting laws.",
            "compliance_steps": [
                "Draft consent notices in plain language, itemising the data and purpose",
                "Offer the notice in English or any Eighth Schedule language",
                "Build a withdrawal mechanism as easy as the consent flow",
                "Keep consent records that can be produced to the Board",
            ],
            "updates": [],
            "summary": "",
            "last_checked": "",
        },
    },
]

SAMPLE_UPDATES = [
    {
        "title": "DPDPA Draft Rules Released for Public Consultation",
        "date": "2025-01-03",
        "summary": "MeitY published the draft Digital Personal Data Protection Rules covering notice, consent managers and breach intimation.",
        "affected_provisions": ["Section 5", "Section 6", "Section 8"],
        "impact_level": "Critical",
        "framework": "DPDPA",
        "source_url": "https://www.meity.gov.in/data-protection-framework",
    },
    {
        "title": "CERT-In Incident Reporting Directions Clarified",
        "date": "2024-11-15",
        "summary": "FAQ update on the six-hour incident reporting window under Section 70B of the IT Act 2000.",
        "affected_provisions": ["Section 70B"],
        "impact_level": "High",
        "framework": "IT Act 2000",
        "source_url": None,
    },
    {
        "title": None,
        "date": None,
        "summary": "Consent manager registration conditions expected in the final rules.",
        "affected_provisions": [],
        "impact_level": None,
        "framework": "DPDPA",
        "source_url": None,
    },
]
