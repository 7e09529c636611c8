"""Interface message catalog for the admin back-office.

Keys are dotted, grouped by screen. Every key exists in both languages;
tests/unit/test_i18n.py keeps the two catalogs in sync.
"""

from __future__ import annotations

from typing import Final

_ICON_PROVIDER_PL: Final = "Dostawca ikony"
_ICON_PROVIDER_EN: Final = "Icon provider"

MESSAGES_PL: Final[dict[str, str]] = {
    "common.add": "Dodaj",
    "common.update": "Zapisz zmiany",
    "common.cancel": "Anuluj",
    "common.delete": "Usuń",
    "common.edit": "Edytuj",
    "common.select": "Wybierz...",
    "common.yes": "Tak",
    "common.no": "Nie",
    "common.moveUp": "W górę",
    "common.moveDown": "W dół",
    "common.actions": "Akcje",
    "common.empty": "Brak wpisów",
    "common.saved": "Zapisano",
    "common.updated": "Zaktualizowano",
    "common.deleted": "Usunięto",
    "common.orderChanged": "Zmieniono kolejność",
    "common.saveFailed": "Nie udało się zapisać zmian",
    "common.deleteFailed": "Nie udało się usunąć wpisu",
    "common.orderFailed": "Nie udało się zmienić kolejności",
    "common.loadFailed": "Nie udało się pobrać danych",
    "common.notFound": "Nie znaleziono",
    "validation.required": "To pole jest wymagane",
    "validation.invalid": "Nieprawidłowa wartość",
    "admin.dashboard.title": "Panel administracyjny",
    "admin.blog.categories": "Kategorie bloga",
    "admin.blog.categoryNamePl": "Nazwa (PL)",
    "admin.blog.categoryNameEn": "Nazwa (EN)",
    "admin.blog.categorySlug": "Slug",
    "admin.blog.categoryDescriptionPl": "Opis (PL)",
    "admin.blog.categoryDescriptionEn": "Opis (EN)",
    "admin.blog.iconName": "Nazwa ikony",
    "admin.blog.iconProvider": _ICON_PROVIDER_PL,
    "admin.blog.categoryActive": "Aktywna",
    "admin.projects.title": "Projekty",
    "admin.projects.titlePl": "Tytuł (PL)",
    "admin.projects.titleEn": "Tytuł (EN)",
    "admin.projects.descriptionPl": "Opis (PL)",
    "admin.projects.descriptionEn": "Opis (EN)",
    "admin.projects.url": "Adres strony",
    "admin.projects.repoUrl": "Repozytorium",
    "admin.projects.repoUrl2": "Drugie repozytorium",
    "admin.projects.imageUrl": "Adres obrazka",
    "admin.projects.active": "Aktywny",
    "admin.skills.title": "Umiejętności",
    "admin.skills.categories": "Kategorie umiejętności",
    "admin.skills.namePl": "Nazwa (PL)",
    "admin.skills.nameEn": "Nazwa (EN)",
    "admin.skills.category": "Kategoria",
    "admin.skills.iconName": "Nazwa ikony",
    "admin.skills.iconProvider": _ICON_PROVIDER_PL,
    "admin.skills.active": "Aktywna",
    "admin.contact.title": "Kontakt",
    "admin.contact.namePl": "Nazwa (PL)",
    "admin.contact.nameEn": "Nazwa (EN)",
    "admin.contact.iconName": "Nazwa ikony",
    "admin.contact.iconProvider": _ICON_PROVIDER_PL,
    "admin.contact.url": "Adres",
    "admin.contact.external": "Link zewnętrzny",
    "admin.contact.newTab": "Otwórz w nowej karcie",
    "admin.navigation.title": "Nawigacja",
    "admin.navigation.labelPl": "Etykieta (PL)",
    "admin.navigation.labelEn": "Etykieta (EN)",
    "admin.navigation.url": "Adres",
    "admin.navigation.external": "Link zewnętrzny",
    "admin.navigation.newTab": "Otwórz w nowej karcie",
    "admin.navigation.active": "Aktywny",
    "admin.topBar.title": "Górny pasek",
    "admin.topBar.namePl": "Nazwa (PL)",
    "admin.topBar.nameEn": "Nazwa (EN)",
    "admin.topBar.iconName": "Nazwa ikony",
    "admin.topBar.iconProvider": _ICON_PROVIDER_PL,
    "admin.topBar.url": "Adres",
    "admin.topBar.external": "Link zewnętrzny",
    "admin.topBar.newTab": "Otwórz w nowej karcie",
}

MESSAGES_EN: Final[dict[str, str]] = {
    "common.add": "Add",
    "common.update": "Save changes",
    "common.cancel": "Cancel",
    "common.delete": "Delete",
    "common.edit": "Edit",
    "common.select": "Select...",
    "common.yes": "Yes",
    "common.no": "No",
    "common.moveUp": "Move up",
    "common.moveDown": "Move down",
    "common.actions": "Actions",
    "common.empty": "No entries",
    "common.saved": "Saved",
    "common.updated": "Updated",
    "common.deleted": "Deleted",
    "common.orderChanged": "Order changed",
    "common.saveFailed": "Could not save changes",
    "common.deleteFailed": "Could not delete the entry",
    "common.orderFailed": "Could not change the order",
    "common.loadFailed": "Could not load data",
    "common.notFound": "Not found",
    "validation.required": "This field is required",
    "validation.invalid": "Invalid value",
    "admin.dashboard.title": "Admin dashboard",
    "admin.blog.categories": "Blog categories",
    "admin.blog.categoryNamePl": "Name (PL)",
    "admin.blog.categoryNameEn": "Name (EN)",
    "admin.blog.categorySlug": "Slug",
    "admin.blog.categoryDescriptionPl": "Description (PL)",
    "admin.blog.categoryDescriptionEn": "Description (EN)",
    "admin.blog.iconName": "Icon name",
    "admin.blog.iconProvider": _ICON_PROVIDER_EN,
    "admin.blog.categoryActive": "Active",
    "admin.projects.title": "Projects",
    "admin.projects.titlePl": "Title (PL)",
    "admin.projects.titleEn": "Title (EN)",
    "admin.projects.descriptionPl": "Description (PL)",
    "admin.projects.descriptionEn": "Description (EN)",
    "admin.projects.url": "Website URL",
    "admin.projects.repoUrl": "Repository",
    "admin.projects.repoUrl2": "Second repository",
    "admin.projects.imageUrl": "Image URL",
    "admin.projects.active": "Active",
    "admin.skills.title": "Skills",
    "admin.skills.categories": "Skill categories",
    "admin.skills.namePl": "Name (PL)",
    "admin.skills.nameEn": "Name (EN)",
    "admin.skills.category": "Category",
    "admin.skills.iconName": "Icon name",
    "admin.skills.iconProvider": _ICON_PROVIDER_EN,
    "admin.skills.active": "Active",
    "admin.contact.title": "Contact",
    "admin.contact.namePl": "Name (PL)",
    "admin.contact.nameEn": "Name (EN)",
    "admin.contact.iconName": "Icon name",
    "admin.contact.iconProvider": _ICON_PROVIDER_EN,
    "admin.contact.url": "URL",
    "admin.contact.external": "External link",
    "admin.contact.newTab": "Open in new tab",
    "admin.navigation.title": "Navigation",
    "admin.navigation.labelPl": "Label (PL)",
    "admin.navigation.labelEn": "Label (EN)",
    "admin.navigation.url": "URL",
    "admin.navigation.external": "External link",
    "admin.navigation.newTab": "Open in new tab",
    "admin.navigation.active": "Active",
    "admin.topBar.title": "Top bar",
    "admin.topBar.namePl": "Name (PL)",
    "admin.topBar.nameEn": "Name (EN)",
    "admin.topBar.iconName": "Icon name",
    "admin.topBar.iconProvider": _ICON_PROVIDER_EN,
    "admin.topBar.url": "URL",
    "admin.topBar.external": "External link",
    "admin.topBar.newTab": "Open in new tab",
}

CATALOGS: Final[dict[str, dict[str, str]]] = {
    "pl": MESSAGES_PL,
    "en": MESSAGES_EN,
}
