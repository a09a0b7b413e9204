"""GoalEngineService - stateful wrapper around the goal pipeline."""

from dataclasses import replace
from typing import Any, Callable, Optional

import structlog

from domain.goal_engine.core.exceptions.domain_errors import SettingsStoreError
from domain.goal_engine.core.ports.settings_store import (
    ISettingsStore,
    SettingsKeys,
)
from domain.goal_engine.core.value_objects.body_profile import (
    WEIGHT_KG_MAX,
    WEIGHT_KG_MIN,
)
from domain.goal_engine.core.value_objects.goal_form import GoalForm
from domain.goal_engine.core.value_objects.goal_mode import GoalMode
from domain.goal_engine.core.value_objects.goal_outputs import GoalOutputs
from domain.goal_engine.core.value_objects.weight_unit import WeightUnit
from domain.goal_engine.calculation.target_service import format_rate
from domain.goal_engine.normalization.input_normalizer import (
    NormalizationResult,
    parse_decimal,
)
from domain.goal_engine.normalization.signature import InputSignature
from domain.goal_engine.normalization.unit_conversion import (
    UnitConversion,
    convert_weight_unit,
    format_weight,
    split_height_cm,
)

from ..orchestrators.goal_orchestrator import GoalOrchestrator

logger = structlog.get_logger(__name__)

DEFAULT_WEIGHT_KG = 70.0
DEFAULT_HEIGHT_CM = 170.0
DEFAULT_AGE = 30
DEFAULT_SEX = "male"
DEFAULT_ACTIVITY_LEVEL = "moderate"
DEFAULT_PROTEIN_PER_KG = 1.8
DEFAULT_FAT_PER_KG = 0.9
DEFAULT_TARGET_RATE = 0.5
DEFAULT_MODE = GoalMode.MAINTAIN.value


def _read_number(
    store: ISettingsStore,
    key: str,
    default: float,
    allow_zero: bool = False,
) -> float:
    """Read a numeric setting, falling back on missing or unusable values.

    Zero counts as missing unless ``allow_zero`` is set (weekly rate).
    """
    value = store.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if value < 0 or (value == 0 and not allow_zero):
        return default
    return float(value)


def _read_text(store: ISettingsStore, key: str, default: str) -> str:
    value = store.get(key)
    return value if isinstance(value, str) and value else default


def load_form(store: ISettingsStore) -> GoalForm:
    """
    Rebuild the editable form from persisted settings.

    Weight is stored in kg and rendered in the stored display unit;
    height is stored in cm and split back into feet and inches.
    """
    weight_kg = _read_number(store, SettingsKeys.USER_WEIGHT, DEFAULT_WEIGHT_KG)
    unit = _read_text(store, SettingsKeys.WEIGHT_UNIT, WeightUnit.KG.value)
    height_cm = _read_number(store, SettingsKeys.USER_HEIGHT_CM, DEFAULT_HEIGHT_CM)
    age = int(_read_number(store, SettingsKeys.USER_AGE, DEFAULT_AGE))
    feet, inches = split_height_cm(height_cm)

    return GoalForm(
        weight_text=format_weight(weight_kg, WeightUnit.from_token(unit)),
        feet_text=str(feet),
        inches_text=str(inches),
        age_text=str(age),
        weight_unit=unit,
        sex=_read_text(store, SettingsKeys.USER_SEX, DEFAULT_SEX),
        activity_level=_read_text(
            store, SettingsKeys.USER_ACTIVITY_LEVEL, DEFAULT_ACTIVITY_LEVEL
        ),
        protein_per_kg=_read_number(
            store, SettingsKeys.PROTEIN_PER_KG, DEFAULT_PROTEIN_PER_KG
        ),
        fat_per_kg=_read_number(store, SettingsKeys.FAT_PER_KG, DEFAULT_FAT_PER_KG),
        target_rate_kg_per_week=_read_number(
            store,
            SettingsKeys.WEEKLY_TARGET_KG_PER_WEEK,
            DEFAULT_TARGET_RATE,
            allow_zero=True,
        ),
        mode=GoalMode.from_storage_key(
            _read_text(store, SettingsKeys.WEIGHT_GOAL_MODE, DEFAULT_MODE)
        ),
    )


class GoalEngineService:
    """
    The goal screen's engine: owns the form, the signature cache and the
    last published outputs, and writes goals back to the settings store.

    The store is injected; nothing here is process-global. Edits go
    through ``update`` which only notifies ``on_change`` (normally a
    debounce scheduler); ``compute_and_persist_if_needed`` does the work.
    """

    def __init__(
        self,
        store: ISettingsStore,
        orchestrator: Optional[GoalOrchestrator] = None,
        form: Optional[GoalForm] = None,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self._store = store
        self._orchestrator = orchestrator or GoalOrchestrator.default()
        self._form = form or load_form(store)
        self._on_change = on_change
        self._signature = InputSignature()
        self._outputs: Optional[GoalOutputs] = None
        self._validation: Optional[NormalizationResult] = None
        self._stored_weight_kg = _read_number(
            store, SettingsKeys.USER_WEIGHT, DEFAULT_WEIGHT_KG
        )
        self.persist_count = 0

    @classmethod
    def load(
        cls,
        store: ISettingsStore,
        orchestrator: Optional[GoalOrchestrator] = None,
    ) -> "GoalEngineService":
        """Build the engine from persisted settings and compute once."""
        service = cls(store=store, orchestrator=orchestrator)
        service.compute_and_persist_if_needed()
        return service

    # Published values

    @property
    def form(self) -> GoalForm:
        return self._form

    @property
    def outputs(self) -> Optional[GoalOutputs]:
        return self._outputs

    @property
    def validation(self) -> Optional[NormalizationResult]:
        return self._validation

    @property
    def maintenance_calories(self) -> Optional[int]:
        return self._outputs.maintenance_calories if self._outputs else None

    @property
    def suggested_daily_intake(self) -> Optional[int]:
        return self._outputs.suggested_daily_intake if self._outputs else None

    @property
    def protein_grams(self) -> int:
        return self._outputs.protein_grams if self._outputs else 0

    @property
    def fat_grams(self) -> int:
        return self._outputs.fat_grams if self._outputs else 0

    @property
    def carbs_grams(self) -> int:
        return self._outputs.carbs_grams if self._outputs else 0

    def set_on_change(self, on_change: Optional[Callable[[], None]]) -> None:
        """Attach the edit listener (typically ``scheduler.notify``)."""
        self._on_change = on_change

    def describe_target(self) -> str:
        """Explanation of the deficit/surplus for the current mode and rate."""
        inputs = self._form.goal_inputs()
        return self._orchestrator.target_service.describe(
            inputs.mode, inputs.target_rate_kg_per_week
        )

    def rate_label(self) -> str:
        """Weekly rate formatted in the display unit."""
        inputs = self._form.goal_inputs()
        return format_rate(inputs.target_rate_kg_per_week, inputs.display_weight_unit)

    # Edits

    def update(self, **changes: Any) -> bool:
        """
        Apply edits to the form and notify the change listener.

        A ``weight_unit`` change without new ``weight_text`` is a unit
        toggle: it goes through ``convert_weight_unit`` so the displayed
        number is converted rather than reread in the new unit. Given
        together with ``weight_text`` the text is taken as typed in
        that unit.

        Args:
            **changes: GoalForm fields; ``mode`` may be a GoalMode or a
                storage key string

        Returns:
            bool: False when the edit left the form unchanged

        Raises:
            TypeError: If a key is not a GoalForm field
        """
        if isinstance(changes.get("mode"), str):
            changes["mode"] = GoalMode.from_storage_key(changes["mode"])

        new_unit = changes.get("weight_unit")
        if new_unit is None or "weight_text" in changes:
            return self._apply(changes)

        del changes["weight_unit"]
        edited = self._apply(changes)
        if new_unit == self._form.weight_unit:
            return edited
        self.convert_weight_unit(new_unit)
        return True

    def _apply(self, changes: dict[str, Any]) -> bool:
        updated = replace(self._form, **changes)
        if updated == self._form:
            return False

        self._form = updated
        if self._on_change is not None:
            self._on_change()
        return True

    def compute_and_persist_if_needed(self) -> bool:
        """
        Recompute and persist unless nothing tracked changed.

        Returns:
            bool: True if a recompute ran, False on a signature cache hit
        """
        return self._recompute({})

    def convert_weight_unit(self, new_unit: str) -> UnitConversion:
        """
        Switch the weight display unit immediately (no debounce).

        The typed value (or the stored weight when the text does not
        parse) is reinterpreted in the old unit and the text field is
        rewritten in the new unit. The unit flag and the converted kg
        go into the same batch as the recomputed goals.
        """
        form = self._form
        current = parse_decimal(form.weight_text)
        if current is None:
            current = WeightUnit.from_token(form.weight_unit).from_kg(
                self._stored_weight_kg
            )

        conversion = convert_weight_unit(current, form.weight_unit, new_unit)
        overrides: dict[str, Any] = {SettingsKeys.WEIGHT_UNIT: new_unit}

        if conversion.changed:
            self._form = replace(
                form, weight_text=conversion.display_text, weight_unit=new_unit
            )
            stored_kg = conversion.stored_kg
            if stored_kg is not None and WEIGHT_KG_MIN < stored_kg < WEIGHT_KG_MAX:
                # Unrounded value wins over the kg parsed from the display text
                overrides[SettingsKeys.USER_WEIGHT] = stored_kg
        else:
            self._form = replace(form, weight_unit=new_unit)

        logger.debug(
            "Weight unit converted",
            from_unit=form.weight_unit,
            to_unit=new_unit,
            text=self._form.weight_text,
        )
        self._recompute(overrides)
        return conversion

    def _recompute(self, overrides: dict[str, Any]) -> bool:
        form = self._form
        # Recorded before computing so a failure below cannot loop
        if not self._signature.changed(form):
            logger.debug("Goal inputs unchanged, skipping recompute")
            if overrides:
                self._persist(overrides)
            return False

        calculation = self._orchestrator.recompute(form)
        normalization = calculation.normalization
        inputs = calculation.inputs

        self._validation = normalization
        self._outputs = calculation.outputs

        values: dict[str, Any] = {
            SettingsKeys.WEIGHT_UNIT: form.weight_unit,
            SettingsKeys.USER_SEX: form.sex,
            SettingsKeys.USER_ACTIVITY_LEVEL: form.activity_level,
            SettingsKeys.PROTEIN_PER_KG: inputs.protein_per_kg,
            SettingsKeys.FAT_PER_KG: inputs.fat_per_kg,
            SettingsKeys.WEEKLY_TARGET_KG_PER_WEEK: inputs.target_rate_kg_per_week,
            SettingsKeys.WEIGHT_GOAL_MODE: inputs.mode.value,
        }
        if normalization.weight_kg is not None:
            values[SettingsKeys.USER_WEIGHT] = normalization.weight_kg
        if normalization.height_cm is not None:
            values[SettingsKeys.USER_HEIGHT_CM] = normalization.height_cm
        if normalization.age is not None:
            values[SettingsKeys.USER_AGE] = normalization.age

        outputs = calculation.outputs
        if outputs is None:
            logger.info(
                "Goal profile incomplete, outputs cleared",
                invalid=normalization.messages(),
            )
        else:
            values.update(
                {
                    SettingsKeys.DAILY_CALORIE_GOAL: outputs.suggested_daily_intake,
                    SettingsKeys.DAILY_PROTEIN_GOAL: outputs.protein_grams,
                    SettingsKeys.DAILY_FAT_GOAL: outputs.fat_grams,
                    SettingsKeys.DAILY_CARB_GOAL: outputs.carbs_grams,
                }
            )
            logger.info(
                "Goals recomputed",
                maintenance=outputs.maintenance_calories,
                suggested=outputs.suggested_daily_intake,
                protein_g=outputs.protein_grams,
                fat_g=outputs.fat_grams,
                carbs_g=outputs.carbs_grams,
                exceeds_target=outputs.exceeds_target,
            )

        values.update(overrides)
        self._persist(values)
        return True

    def _persist(self, values: dict[str, Any]) -> None:
        if SettingsKeys.USER_WEIGHT in values:
            self._stored_weight_kg = values[SettingsKeys.USER_WEIGHT]
        try:
            self._store.set_many(values)
        except SettingsStoreError as e:
            logger.warning(
                "Persisting goal settings failed, keeping in-memory values",
                error=str(e),
                keys=sorted(values),
            )
            return
        self.persist_count += 1
