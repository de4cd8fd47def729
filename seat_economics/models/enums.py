from enum import Enum


class SignupMode(str, Enum):
    INDIVIDUAL = "individual"
    TEAM = "team"


class ConversionScenario(str, Enum):
    CONSERVATIVE = "conservative"
    REALISTIC = "realistic"
    OPTIMISTIC = "optimistic"


class PromoCodeStatus(str, Enum):
    ACTIVE = "active"
    EXPIRED = "expired"
    DEPLETED = "depleted"
    INACTIVE = "inactive"
