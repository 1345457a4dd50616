"""Suggested values offered next to free-text fields. Not enforced."""

COMMON_FREQUENCIES = [
    "Once daily",
    "Twice daily",
    "Three times daily",
    "Four times daily",
    "Every 6 hours",
    "Every 8 hours",
    "Every 12 hours",
    "As needed",
    "Before meals",
    "After meals",
    "At bedtime",
]

COMMON_VACCINES = [
    "COVID-19 (Pfizer-BioNTech)",
    "COVID-19 (Moderna)",
    "COVID-19 (Johnson & Johnson)",
    "Influenza (Flu)",
    "Tetanus, Diphtheria, Pertussis (Tdap)",
    "Tetanus, Diphtheria (Td)",
    "Measles, Mumps, Rubella (MMR)",
    "Varicella (Chickenpox)",
    "Hepatitis A",
    "Hepatitis B",
    "Human Papillomavirus (HPV)",
    "Meningococcal",
    "Pneumococcal (PCV13)",
    "Pneumococcal (PPSV23)",
    "Shingles (Zoster)",
    "Polio (IPV)",
    "Haemophilus influenzae type b (Hib)",
]

COMMON_TESTS = [
    "Complete Blood Count (CBC)",
    "Basic Metabolic Panel (BMP)",
    "Comprehensive Metabolic Panel (CMP)",
    "Lipid Panel",
    "Hemoglobin A1C",
    "Thyroid Stimulating Hormone (TSH)",
    "Vitamin D",
    "Vitamin B12",
    "Fasting Glucose",
    "Creatinine",
    "Blood Urea Nitrogen (BUN)",
    "Liver Function Tests",
    "C-Reactive Protein (CRP)",
    "Erythrocyte Sedimentation Rate (ESR)",
    "Prostate Specific Antigen (PSA)",
]

COMMON_CONDITIONS = [
    "Heart Disease",
    "High Blood Pressure",
    "Diabetes Type 1",
    "Diabetes Type 2",
    "Stroke",
    "Cancer (Breast)",
    "Cancer (Lung)",
    "Cancer (Colon)",
    "Cancer (Prostate)",
    "Cancer (Other)",
    "Asthma",
    "COPD",
    "Depression",
    "Anxiety",
    "Alzheimer's Disease",
    "Parkinson's Disease",
    "Kidney Disease",
    "Liver Disease",
    "Osteoporosis",
    "Arthritis",
    "Thyroid Disease",
    "Blood Clots",
    "High Cholesterol",
]
