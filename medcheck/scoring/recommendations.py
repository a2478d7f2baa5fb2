"""
MedCheck — Рекомендації

Детермінована функція (risk, condition_id) → список рядків:
1. Рядки рівня ризику (3 шт.)
2. Рядки для конкретного стану (таблиця нижче, може бути порожньо)
3. Два універсальних застереження: завжди останні
"""

from typing import Dict, List, Union

from medcheck.schemas import RiskLevel


DISCLAIMERS = (
    "This assessment is for informational purposes only and should not replace professional medical advice.",
    "Consult with a healthcare provider for proper diagnosis and treatment.",
)


RISK_TIER_RECOMMENDATIONS: Dict[RiskLevel, List[str]] = {
    RiskLevel.HIGH: [
        "⚠️ HIGH RISK: Seek immediate medical attention from a healthcare professional.",
        "Schedule an appointment with your doctor as soon as possible.",
        "Keep a detailed log of your symptoms and their severity.",
    ],
    RiskLevel.MODERATE: [
        "⚠️ MODERATE RISK: Consider scheduling a medical consultation.",
        "Monitor your symptoms and note any changes or worsening.",
        "Maintain a healthy lifestyle and follow preventive measures.",
    ],
    RiskLevel.LOW: [
        "✅ LOW RISK: Continue monitoring your health and symptoms.",
        "Maintain regular health check-ups and preventive care.",
        "Consider lifestyle modifications for better health outcomes.",
    ],
}


CONDITION_RECOMMENDATIONS: Dict[str, Dict[RiskLevel, List[str]]] = {
    "mesothelioma": {
        RiskLevel.HIGH: ["Consider chest imaging (X-ray or CT scan)", "Discuss asbestos exposure history with your doctor"],
        RiskLevel.MODERATE: ["Monitor respiratory symptoms closely", "Avoid further asbestos exposure"],
        RiskLevel.LOW: ["Maintain lung health with regular exercise", "Avoid smoking and secondhand smoke"],
    },
    "chronickidneydisease": {
        RiskLevel.HIGH: ["Request kidney function tests (creatinine, BUN)", "Monitor blood pressure regularly"],
        RiskLevel.MODERATE: ["Stay hydrated and limit sodium intake", "Monitor urination patterns"],
        RiskLevel.LOW: ["Maintain healthy blood pressure", "Stay hydrated and eat a balanced diet"],
    },
    "coronaryheartdisease": {
        RiskLevel.HIGH: ["Consider cardiac evaluation (ECG, stress test)", "Monitor chest pain episodes"],
        RiskLevel.MODERATE: ["Adopt heart-healthy diet and exercise", "Monitor blood pressure and cholesterol"],
        RiskLevel.LOW: ["Maintain regular cardiovascular exercise", "Follow a heart-healthy diet"],
    },
    "diabetesmelitus": {
        RiskLevel.HIGH: ["Request blood glucose and HbA1c testing", "Monitor symptoms of high blood sugar"],
        RiskLevel.MODERATE: ["Monitor blood sugar levels if possible", "Maintain healthy weight and diet"],
        RiskLevel.LOW: ["Follow a balanced diet low in refined sugars", "Maintain regular physical activity"],
    },
    "livercirrhosis": {
        RiskLevel.HIGH: ["Request liver function tests", "Avoid alcohol completely"],
        RiskLevel.MODERATE: ["Limit alcohol consumption", "Monitor abdominal symptoms"],
        RiskLevel.LOW: ["Maintain liver health with balanced diet", "Limit alcohol and avoid hepatotoxic substances"],
    },
}


def generate_recommendations(risk: Union[RiskLevel, str], condition_id: str) -> List[str]:
    """
    Згенерувати рекомендації.

    Args:
        risk: Рівень ризику
        condition_id: Ідентифікатор стану (невідомий: без специфічних рядків)

    Returns:
        Новий список рядків; застереження завжди в кінці
    """
    risk = RiskLevel(risk)

    specific = CONDITION_RECOMMENDATIONS.get(condition_id, {}).get(risk, [])

    return [
        *RISK_TIER_RECOMMENDATIONS[risk],
        *specific,
        *DISCLAIMERS,
    ]
