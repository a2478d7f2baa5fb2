"""
MedCheck — Вбудовані довідкові дані

Структура:
{
  "condition_id": {
    "name": ...,
    "description": ...,
    "symptoms": [...],
    "riskFactors": [...]
  },
  ...
}

Порядок станів та симптомів значущий: від нього залежать
результати пошуку та common_symptoms().
"""

from enum import Enum


class ConditionKey(str, Enum):
    """Ідентифікатори вбудованих станів"""
    MESOTHELIOMA = "mesothelioma"
    CHRONIC_KIDNEY_DISEASE = "chronickidneydisease"
    CORONARY_HEART_DISEASE = "coronaryheartdisease"
    DIABETES_MELLITUS = "diabetesmelitus"
    LIVER_CIRRHOSIS = "livercirrhosis"


MEDICAL_CONDITIONS = {
    ConditionKey.MESOTHELIOMA.value: {
        "name": "Mesothelioma",
        "description": "Cancer affecting the lining of lungs, abdomen, or heart",
        "symptoms": [
            "Chest pain",
            "Shortness of breath",
            "Persistent cough",
            "Fatigue",
            "Weight loss",
            "Abdominal pain",
            "Abdominal swelling",
            "Difficulty swallowing",
            "Hoarse voice",
            "Night sweats",
        ],
        "riskFactors": ["Asbestos exposure", "Age over 65", "Male gender", "Radiation exposure"],
    },
    ConditionKey.CHRONIC_KIDNEY_DISEASE.value: {
        "name": "Chronic Kidney Disease",
        "description": "Gradual loss of kidney function over time",
        "symptoms": [
            "Fatigue",
            "Swelling in legs/feet",
            "Frequent urination",
            "Blood in urine",
            "Foamy urine",
            "High blood pressure",
            "Nausea",
            "Loss of appetite",
            "Muscle cramps",
            "Itchy skin",
        ],
        "riskFactors": ["Diabetes", "High blood pressure", "Family history", "Age over 60"],
    },
    ConditionKey.CORONARY_HEART_DISEASE.value: {
        "name": "Coronary Heart Disease",
        "description": "Narrowed or blocked coronary arteries",
        "symptoms": [
            "Chest pain",
            "Chest pressure",
            "Shortness of breath",
            "Fatigue",
            "Heart palpitations",
            "Dizziness",
            "Nausea",
            "Cold sweats",
            "Pain in arms/shoulders",
            "Jaw pain",
        ],
        "riskFactors": ["High cholesterol", "High blood pressure", "Smoking", "Diabetes"],
    },
    ConditionKey.DIABETES_MELLITUS.value: {
        "name": "Diabetes Mellitus",
        "description": "High blood sugar due to insulin problems",
        "symptoms": [
            "Frequent urination",
            "Excessive thirst",
            "Increased hunger",
            "Fatigue",
            "Blurred vision",
            "Slow healing wounds",
            "Frequent infections",
            "Weight loss",
            "Tingling in hands/feet",
            "Dry mouth",
        ],
        "riskFactors": ["Family history", "Obesity", "Age over 45", "Sedentary lifestyle"],
    },
    ConditionKey.LIVER_CIRRHOSIS.value: {
        "name": "Liver Cirrhosis",
        "description": "Scarring and damage to the liver",
        "symptoms": [
            "Fatigue",
            "Abdominal pain",
            "Abdominal swelling",
            "Jaundice",
            "Nausea",
            "Loss of appetite",
            "Weight loss",
            "Swelling in legs",
            "Easy bruising",
            "Dark urine",
            "Pale stools",
            "Confusion",
        ],
        "riskFactors": ["Alcohol abuse", "Hepatitis B/C", "Fatty liver disease", "Autoimmune diseases"],
    },
}
