"""Built-in translations for the update alert."""

CATALOGS = {
    "en": {
        "update_available": "Update Available",
        "new_version_message": "A new version of {app_name} is available. Please update to version {version} now.",
        "update": "Update",
        "next_time": "Next time",
        "skip_version": "Skip this version",
    },
    "fr": {
        "update_available": "Mise à jour disponible",
        "new_version_message": "Une nouvelle version de {app_name} est disponible. Veuillez mettre à jour vers la version {version} maintenant.",
        "update": "Mettre à jour",
        "next_time": "La prochaine fois",
        "skip_version": "Ignorer cette version",
    },
    "de": {
        "update_available": "Update verfügbar",
        "new_version_message": "Eine neue Version von {app_name} ist verfügbar. Bitte aktualisiere jetzt auf Version {version}.",
        "update": "Aktualisieren",
        "next_time": "Später",
        "skip_version": "Diese Version überspringen",
    },
    "es": {
        "update_available": "Actualización disponible",
        "new_version_message": "Hay una nueva versión de {app_name} disponible. Por favor, actualiza a la versión {version} ahora.",
        "update": "Actualizar",
        "next_time": "La próxima vez",
        "skip_version": "Saltar esta versión",
    },
    "it": {
        "update_available": "Aggiornamento disponibile",
        "new_version_message": "È disponibile una nuova versione di {app_name}. Aggiorna ora alla versione {version}.",
        "update": "Aggiorna",
        "next_time": "La prossima volta",
        "skip_version": "Salta questa versione",
    },
    "nl": {
        "update_available": "Update beschikbaar",
        "new_version_message": "Er is een nieuwe versie van {app_name} beschikbaar. Werk nu bij naar versie {version}.",
        "update": "Bijwerken",
        "next_time": "Volgende keer",
        "skip_version": "Deze versie overslaan",
    },
    "pt": {
        "update_available": "Atualização disponível",
        "new_version_message": "Uma nova versão do {app_name} está disponível. Atualize agora para a versão {version}.",
        "update": "Atualizar",
        "next_time": "Na próxima vez",
        "skip_version": "Pular esta versão",
    },
    "pt-PT": {
        "update_available": "Atualização disponível",
        "new_version_message": "Está disponível uma nova versão da aplicação {app_name}. Por favor atualize para a versão {version}.",
        "update": "Atualizar",
        "next_time": "Mais tarde",
        "skip_version": "Ignorar esta versão",
    },
    "ja": {
        "update_available": "アップデートがあります",
        "new_version_message": "{app_name} の新しいバージョンがあります。バージョン {version} にアップデートしてください。",
        "update": "アップデート",
        "next_time": "次回",
        "skip_version": "このバージョンをスキップ",
    },
    "ru": {
        "update_available": "Доступно обновление",
        "new_version_message": "Доступна новая версия {app_name}. Пожалуйста, обновитесь до версии {version}.",
        "update": "Обновить",
        "next_time": "В следующий раз",
        "skip_version": "Пропустить эту версию",
    },
}

FALLBACK_LANGUAGE = "en"
