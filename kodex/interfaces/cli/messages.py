"""
User-facing strings for the CLI, per locale.

English is the fallback for unknown locales and for keys missing from a
catalog. Strings may contain rich markup and ``str.format`` placeholders.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

CATALOGS: dict[str, dict[str, str]] = {
    "en": {
        "header": "CLI Component Builder",
        "tagline": "Your Private Component Library Bundler",
        "categories_detected": "{count} categories detected: {types}",
        "components_loaded": "{count} components loaded in total",
        "groups_found": "{count} groups found",
        "controls_title": "Controls",
        "controls_toggle": "toggle entries (e.g. 1,3-5)",
        "controls_all": "select / deselect everything",
        "controls_confirm": "confirm selection",
        "controls_exit": "exit",
        "step_select_types": "Step 1/3: Which categories do you want to use?",
        "step_select_groups": "Step 2/3: Which groups do you want to include?",
        "step_select_items": "Step 3/3: Which components do you want to use?",
        "invalid_select_types": "Please select at least one category.",
        "invalid_select_groups": "Please select at least one group.",
        "invalid_select_items": "Please select at least one component or group.",
        "prompt_input": "Numbers to toggle, 'all' / 'none', Enter to confirm",
        "invalid_token": "Ignoring unknown entry: {token}",
        "all_groups": "✓ Include all groups",
        "components_word": "components",
        "selected_total": "{count} components selected in total",
        "bundle_question": "Do you want to bundle the files by type?",
        "separate_created": "Separate files created:",
        "bundle_created": "Bundled files created:",
        "build_success": "{count} components generated successfully!",
        "files_location": "Files are located in: {path}",
        "nothing_selected": "No components selected",
        "cancelled": "Cancelled, no files were generated",
        "err_dir_missing": "components/ folder not found: {path}",
        "err_empty": "No JSON components found in {path}",
        "err_parse": "Error loading components: {error}",
        "err_write": "Failed to write {path}: {reason}",
        "err_unexpected": "Error: {error}",
        "list_title": "Available components",
        "list_total": "Total: {components} components in {types} categories",
        "list_groups": "{count} groups available",
        "config_hint": "Configuration: edit {file} to customize colors",
        "init_start": "Initializing project...",
        "init_created": "{path} folder created",
        "init_exists": "{path} folder already exists",
        "init_done": "Project initialized!",
        "init_next": "Next steps: add JSON components to {path} and run kodex",
        "config_file": "Configuration file: {file}",
        "config_settings": "Available settings:",
        "config_paths": "paths.components_dir / paths.dist_dir - input and output folders",
        "config_type_colors": "ui.type_colors - colors for the different file types",
        "config_colors": "ui.colors - general UI colors",
        "config_locale": "ui.locale - language of the CLI (en, de)",
        "config_banner": "ui.show_banner - show the banner on build",
        "config_output": "output.default_bundle - default answer of the bundle question",
        "config_effective": "Effective configuration",
    },
    "de": {
        "header": "CLI Component Builder",
        "tagline": "Your Private Component Library Bundler",
        "categories_detected": "{count} Kategorien erkannt: {types}",
        "components_loaded": "{count} Komponenten insgesamt geladen",
        "groups_found": "{count} Gruppen gefunden",
        "controls_title": "Steuerung",
        "controls_toggle": "Einträge auswählen/abwählen (z.B. 1,3-5)",
        "controls_all": "alles auswählen / abwählen",
        "controls_confirm": "Auswahl bestätigen",
        "controls_exit": "Programm beenden",
        "step_select_types": "Schritt 1/3: Welche Kategorien möchtest du auswählen?",
        "step_select_groups": "Schritt 2/3: Welche Gruppen möchtest du einschließen?",
        "step_select_items": "Schritt 3/3: Welche Komponenten möchtest du verwenden?",
        "invalid_select_types": "Bitte wähle mindestens eine Kategorie aus.",
        "invalid_select_groups": "Bitte wähle mindestens eine Gruppe aus.",
        "invalid_select_items": "Bitte wähle mindestens eine Komponente oder Gruppe aus.",
        "prompt_input": "Nummern umschalten, 'all' / 'none', Enter bestätigt",
        "invalid_token": "Unbekannter Eintrag ignoriert: {token}",
        "all_groups": "✓ Alle Gruppen einschließen",
        "components_word": "Komponenten",
        "selected_total": "{count} Komponenten insgesamt ausgewählt",
        "bundle_question": "Möchtest du die Dateien nach Typ bündeln?",
        "separate_created": "Separate Dateien erstellt:",
        "bundle_created": "Gebündelte Dateien erstellt:",
        "build_success": "{count} Komponenten erfolgreich generiert!",
        "files_location": "Dateien befinden sich in: {path}",
        "nothing_selected": "Keine Komponenten ausgewählt",
        "cancelled": "Abgebrochen, es wurden keine Dateien erstellt",
        "err_dir_missing": "components/ Ordner nicht gefunden: {path}",
        "err_empty": "Keine JSON-Komponenten gefunden in {path}",
        "err_parse": "Fehler beim Laden der Komponenten: {error}",
        "err_write": "Fehler beim Schreiben von {path}: {reason}",
        "err_unexpected": "Fehler: {error}",
        "list_title": "Verfügbare Komponenten",
        "list_total": "Gesamt: {components} Komponenten in {types} Kategorien",
        "list_groups": "{count} Gruppen verfügbar",
        "config_hint": "Konfiguration: {file} bearbeiten um Farben anzupassen",
        "init_start": "Initialisiere Projekt...",
        "init_created": "{path} Ordner erstellt",
        "init_exists": "{path} Ordner existiert bereits",
        "init_done": "Projekt initialisiert!",
        "init_next": "Nächste Schritte: JSON-Komponenten in {path} ablegen und kodex starten",
        "config_file": "Konfigurationsdatei: {file}",
        "config_settings": "Verfügbare Einstellungen:",
        "config_paths": "paths.components_dir / paths.dist_dir - Eingabe- und Ausgabeordner",
        "config_type_colors": "ui.type_colors - Farben für verschiedene Dateitypen",
        "config_colors": "ui.colors - Allgemeine UI-Farben",
        "config_locale": "ui.locale - Sprache der CLI (en, de)",
        "config_banner": "ui.show_banner - Banner beim Build anzeigen",
        "config_output": "output.default_bundle - Standardantwort der Bündel-Frage",
        "config_effective": "Aktive Konfiguration",
    },
}


class Messages:
    """Locale-bound message lookup."""

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        if locale not in CATALOGS:
            logger.warning("Unknown locale %r, falling back to %r", locale, DEFAULT_LOCALE)
            locale = DEFAULT_LOCALE
        self.locale = locale
        self._catalog = CATALOGS[locale]

    def t(self, key: str, **kwargs: Any) -> str:
        """Look up ``key`` and format it; unknown keys return the key itself."""
        template = self._catalog.get(key) or CATALOGS[DEFAULT_LOCALE].get(key)
        if template is None:
            logger.debug("Missing message key %r", key)
            return key
        return template.format(**kwargs) if kwargs else template
