"""Suggestion engine grouping strings and reusing their translations."""

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from loguru import logger

from .config import AssistantConfig
from .math_rewriter import translate_math
from .models import GroupKey, GroupStatus, SubstringKind, SuggestionGroup, Template
from .placeholders import KIND_SPECS, string_to_group_key
from .template import create_template, populate_template


class TranslationAssistant:
    """Provides translation suggestions for groups of similar strings."""

    string_to_group_key = staticmethod(string_to_group_key)
    create_template = staticmethod(create_template)
    populate_template = staticmethod(populate_template)

    def __init__(
        self,
        all_items: Sequence[Any],
        get_english_str: Callable[[Any], str],
        get_translation: Callable[[Any], Optional[str]],
        lang: str,
    ):
        """Initialize assistant and build one template per group.

        Args:
            all_items: Items to group and to take translations from
            get_english_str: Returns the English string of an item
            get_translation: Returns the existing translation of an item, if any
            lang: Language of the translations, e.g. "pt" rewrites `\\sin` as
                `\\operatorname{sen}`
        """
        self.get_english_str = get_english_str
        self.get_translation = get_translation
        self.lang = lang
        self.suggestion_groups = self._build_suggestion_groups(all_items)

    @classmethod
    def from_config(
        cls,
        all_items: Sequence[Any],
        get_english_str: Callable[[Any], str],
        get_translation: Callable[[Any], Optional[str]],
        config: AssistantConfig,
    ) -> "TranslationAssistant":
        """Create an assistant for the language set in `config`."""
        return cls(all_items, get_english_str, get_translation, config.lang)

    def suggest(self, items_to_translate: Sequence[Any]) -> List[Tuple[Any, Optional[str]]]:
        """Return a (item, suggestion) pair for every item, in order.

        The suggestion is None when no template applies to the item.  Items
        may be any objects get_english_str accepts.
        """
        return [(item, self._suggest_one(item)) for item in items_to_translate]

    def _suggest_one(self, item: Any) -> Optional[str]:
        english_str = self.get_english_str(item)
        key = string_to_group_key(english_str)

        # Items that are only math, a graphie or a widget
        if key.shape == KIND_SPECS[SubstringKind.MATH].placeholder:
            # Math containing natural language text needs a template
            if "\\text" not in english_str:
                return translate_math(english_str, self.lang)
        elif key.shape in (
            KIND_SPECS[SubstringKind.GRAPHIE].placeholder,
            KIND_SPECS[SubstringKind.WIDGET].placeholder,
        ):
            return english_str

        group = self.suggestion_groups.get(key)
        if group is None or not isinstance(group.template, Template):
            return None

        return populate_template(group.template, english_str, self.lang)

    def _build_suggestion_groups(self, items: Sequence[Any]) -> Dict[GroupKey, SuggestionGroup]:
        """Group items by the shape of their English strings.

        Each group gets a template created from its first translated item.
        A group whose template can't be created keeps the TemplateFailure.

        Args:
            items: Items to group

        Returns:
            Groups by key, in order of first appearance
        """
        buckets: Dict[GroupKey, List[Any]] = {}
        for item in items:
            key = string_to_group_key(self.get_english_str(item))
            buckets.setdefault(key, []).append(item)

        groups: Dict[GroupKey, SuggestionGroup] = {}
        for key, bucket in buckets.items():
            template = None
            for item in bucket:
                translated_str = self.get_translation(item)
                if translated_str:
                    template = create_template(
                        self.get_english_str(item), translated_str, self.lang)
                    break

            group = SuggestionGroup(key=key, items=tuple(bucket), template=template)
            groups[key] = group

            if group.status == GroupStatus.FAILED:
                logger.debug(
                    "Group {} has no usable template: {}",
                    group.key.serialize(), group.template.message,
                )

        stats = self._count_statuses(groups.values())
        logger.info(
            "Grouped {} items into {} groups ({} templated, {} failed, {} untranslated)",
            len(items), len(groups),
            stats[GroupStatus.TEMPLATED], stats[GroupStatus.FAILED],
            stats[GroupStatus.UNTRANSLATED],
        )

        return groups

    @staticmethod
    def _count_statuses(groups) -> Dict[GroupStatus, int]:
        counts = {status: 0 for status in GroupStatus}
        for group in groups:
            counts[group.status] += 1
        return counts

    @property
    def groups(self) -> List[SuggestionGroup]:
        """Suggestion groups in order of first appearance."""
        return list(self.suggestion_groups.values())

    def get_group(self, item: Any) -> Optional[SuggestionGroup]:
        """Get the group sharing the shape of an item, if the corpus has one."""
        return self.suggestion_groups.get(string_to_group_key(self.get_english_str(item)))

    def statistics(self) -> Dict[str, int]:
        """Count groups and items per group status."""
        counts = self._count_statuses(self.suggestion_groups.values())
        stats = {status.value: count for status, count in counts.items()}
        stats["groups"] = len(self.suggestion_groups)
        stats["items"] = sum(len(g.items) for g in self.suggestion_groups.values())
        return stats
