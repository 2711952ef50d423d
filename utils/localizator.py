import json
from pathlib import Path
from typing import Optional

import config
from enums.message_entity import MessageEntity

L10N_DIR = Path(__file__).resolve().parent.parent / "l10n"


class Localizator:

    @staticmethod
    def get_text(entity: MessageEntity, key: str, lang: Optional[str] = None) -> str:
        """
        Get localized text for given entity and key.

        Args:
            entity: Entity type (ADMIN, USER, COMMON)
            key: Localization key
            lang: Optional language code (e.g., "en").
                  If None, uses config.LANGUAGE.

        Returns:
            Localized text string
        """
        language = lang if lang is not None else config.LANGUAGE
        localization_file = L10N_DIR / f"{language}.json"

        with open(localization_file, "r", encoding="UTF-8") as f:
            data = json.loads(f.read())
            if entity == MessageEntity.ADMIN:
                return data["admin"][key]
            elif entity == MessageEntity.USER:
                return data["user"][key]
            else:
                return data["common"][key]
