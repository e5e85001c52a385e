from enum import Enum

from pydantic import BaseModel


class WeatherAlertType(str, Enum):
    RAIN = "RAIN"
    DROUGHT = "DROUGHT"
    FROST = "FROST"
    STORM = "STORM"
    HEAT = "HEAT"
    NONE = "NONE"


class AlertSeverity(str, Enum):
    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"
    EXTREME = "EXTREME"


class WeatherAlert(BaseModel):
    type: WeatherAlertType
    severity: AlertSeverity
    title: str
    description: str
    action: str
