from enum import Enum

class ComponentType(str, Enum):
    STREET_NUMBER = 'street_number'
    STREET = 'route'
    CITY = 'locality'
    STATE = 'administrative_area_level_1'
    COUNTRY = 'country'
    POSTAL_CODE = 'postal_code'

class NameForm(Enum):
    LONG = 'long_name'
    SHORT = 'short_name'
