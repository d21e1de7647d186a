"""Building habits from the template catalog."""

from __future__ import annotations

from ..constants.templates import HABIT_TEMPLATES, HabitTemplate
from ..models.habit import Habit

_TEMPLATES_BY_ID = {template.id: template for template in HABIT_TEMPLATES}


def template_definition(template_id: str) -> HabitTemplate:
    """Look up a template; unknown ids raise ``KeyError``."""

    return _TEMPLATES_BY_ID[template_id]


def templates_in_category(category: str) -> list[HabitTemplate]:
    wanted = category.strip().lower()
    return [t for t in HABIT_TEMPLATES if t.category.lower() == wanted]


def habit_from_template(template: HabitTemplate, **overrides) -> Habit:
    """Unsaved ``Habit`` carrying the template's configuration.

    Keyword overrides replace individual fields (for example a custom name).
    """

    fields = {
        "name": template.name,
        "description": template.description,
        "category": template.category,
        "frequency": template.frequency.value,
        "target_type": template.target_type.value,
        "target_value": template.target_value,
    }
    fields.update(overrides)
    return Habit(**fields)


__all__ = ["habit_from_template", "template_definition", "templates_in_category"]
