import copy

import pytest

from ti18n import Ti18n

EN_DATA = {
    "languages": {"en": "English", "fr": "French", "de": "German"},
    "dictionary": {
        "greeting": "Hello",
        "farewell": "Goodbye",
        "welcome": "Welcome, {name}!",
        "items": "You have {count} items in your cart.",
    },
}

FR_DATA = {
    "languages": {"en": "Anglais", "fr": "Français", "de": "Allemand"},
    "dictionary": {
        "greeting": "Bonjour",
        "farewell": "Au revoir",
        "welcome": "Bienvenue, {name} !",
        "items": "Vous avez {count} articles dans votre panier.",
    },
}

ES_DATA = {
    "languages": {"en": "Inglés", "es": "Español"},
    "dictionary": {
        "greeting": "¡Hola!",
        "farewell": "¡Adiós!",
        "items": "Tienes {count} artículos en tu carrito.",
    },
}

KEYS = ["greeting", "farewell", "welcome", "items"]


@pytest.fixture
def keys():
    return list(KEYS)


@pytest.fixture
def i18n():
    instance = Ti18n(keys=KEYS, country_code_mappings=[
        {"locale": "en", "code": "US"},
        {"locale": "fr", "code": "FR"},
        {"locale": "es", "code": "ES"},
    ])
    instance.load_locales({"en": EN_DATA, "fr": FR_DATA})
    return instance


@pytest.fixture
def en_data():
    return copy.deepcopy(EN_DATA)


@pytest.fixture
def fr_data():
    return copy.deepcopy(FR_DATA)


@pytest.fixture
def es_data():
    return copy.deepcopy(ES_DATA)
