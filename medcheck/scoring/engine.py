"""
MedCheck — Движок оцінки (Scoring Engine)

Чиста функція від (condition_id, симптоми, фактори ризику):
- matches = |вибрані ∩ симптоми стану|
- score = round_half_up(100 * matches / всього симптомів)
- risk_factor_score: аналогічно по факторах ризику
- рівень ризику за score + ескалація за risk_factor_score
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Union

from medcheck.catalog import ConditionCatalog
from medcheck.config import ScoringConfig
from medcheck.schemas import Assessment, RiskLevel, UserInfo
from medcheck.utils import UnknownConditionError, generate_id, get_logger, utc_now
from .recommendations import generate_recommendations


logger = get_logger(__name__)


def percent(part: int, total: int) -> int:
    """
    Відсоток з округленням half-up.

    Цілочисельна арифметика: floor(100 * part / total + 0.5).
    """
    if total <= 0:
        return 0
    return (200 * part + total) // (2 * total)


def count_matches(selected: Iterable[str], reference: Sequence[str]) -> int:
    """Кількість точних (case-sensitive) співпадінь"""
    return len(set(selected) & set(reference))


@dataclass(frozen=True)
class ScoreResult:
    """Результат score()"""
    score: int
    risk: RiskLevel
    matches: int
    risk_factor_score: int
    total_symptoms: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "risk": self.risk.value,
            "matches": self.matches,
            "risk_factor_score": self.risk_factor_score,
            "total_symptoms": self.total_symptoms,
        }


class ScoringEngine:
    """
    Движок оцінки ризику.

    Приклад використання:
        engine = ScoringEngine(ConditionCatalog.default())

        result = engine.score(
            "coronaryheartdisease",
            ["Chest pain", "Fatigue", "Dizziness"],
            ["Smoking", "Diabetes"],
        )
        print(result.score, result.risk)  # 30 RiskLevel.MODERATE

        # Повна оцінка з рекомендаціями
        assessment = engine.assess("coronaryheartdisease", ["Chest pain"])
    """

    def __init__(
        self,
        catalog: ConditionCatalog,
        config: Optional[ScoringConfig] = None,
        clock: Callable[[], datetime] = utc_now
    ):
        self.catalog = catalog
        self.config = config or ScoringConfig()
        self._clock = clock

    def score(
        self,
        condition_id: str,
        selected_symptoms: Iterable[str],
        selected_risk_factors: Optional[Iterable[str]] = None
    ) -> ScoreResult:
        """
        Обчислити score та рівень ризику.

        Args:
            condition_id: Ідентифікатор стану
            selected_symptoms: Вибрані симптоми (порожньо: score 0)
            selected_risk_factors: Вибрані фактори ризику (опціонально)

        Returns:
            ScoreResult

        Raises:
            UnknownConditionError: стан відсутній у каталозі
        """
        condition = self.catalog.get(condition_id)
        if condition is None:
            raise UnknownConditionError(condition_id)

        matches = count_matches(selected_symptoms, condition.symptoms)
        score = percent(matches, condition.symptom_count)

        risk_factor_score = 0
        if selected_risk_factors:
            risk_matches = count_matches(selected_risk_factors, condition.risk_factors)
            risk_factor_score = percent(risk_matches, condition.risk_factor_count)

        risk = self.escalate(self.classify(score), risk_factor_score)

        return ScoreResult(
            score=score,
            risk=risk,
            matches=matches,
            risk_factor_score=risk_factor_score,
            total_symptoms=condition.symptom_count,
        )

    def classify(self, score: int) -> RiskLevel:
        """Базовий ризик за score симптомів"""
        if score >= self.config.high_threshold:
            return RiskLevel.HIGH
        elif score >= self.config.moderate_threshold:
            return RiskLevel.MODERATE
        return RiskLevel.LOW

    def escalate(self, risk: RiskLevel, risk_factor_score: int) -> RiskLevel:
        """
        Підвищити ризик за факторами ризику.

        Перевірки послідовні: low → moderate, потім moderate → high,
        тож при risk_factor_score >= 75 low стає high за один виклик.
        """
        if risk_factor_score >= self.config.risk_factor_moderate and risk == RiskLevel.LOW:
            risk = RiskLevel.MODERATE
        if risk_factor_score >= self.config.risk_factor_high and risk == RiskLevel.MODERATE:
            risk = RiskLevel.HIGH
        return risk

    def recommendations(self, risk: Union[RiskLevel, str], condition_id: str) -> List[str]:
        """Рекомендації для (risk, condition_id)"""
        return generate_recommendations(risk, condition_id)

    def assess(
        self,
        condition_id: str,
        symptoms: Iterable[str],
        risk_factors: Optional[Iterable[str]] = None,
        session_id: Optional[str] = None,
        user_info: Optional[UserInfo] = None
    ) -> Assessment:
        """
        Створити Assessment: score + рекомендації + id + timestamp.

        Raises:
            UnknownConditionError: стан відсутній у каталозі
        """
        # Порядок вибору зберігаємо, дублікати прибираємо
        selected = list(dict.fromkeys(symptoms))
        factors = list(dict.fromkeys(risk_factors)) if risk_factors else None

        result = self.score(condition_id, selected, factors)
        condition = self.catalog.get(condition_id)

        assessment = Assessment(
            id=generate_id("assessment"),
            condition=condition.id,
            condition_name=condition.name,
            score=result.score,
            risk=result.risk,
            matches=result.matches,
            total_symptoms=result.total_symptoms,
            selected_symptoms=selected,
            risk_factor_score=result.risk_factor_score,
            recommendations=self.recommendations(result.risk, condition.id),
            timestamp=self._clock(),
            session_id=session_id,
            user_info=user_info,
        )

        logger.debug(
            "Assessment %s: %s score=%d risk=%s",
            assessment.id, condition.id, assessment.score, assessment.risk.value
        )
        return assessment
