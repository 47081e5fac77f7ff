"""Endpoint paths exposed by the actuator device firmware"""


class ActuatorPaths:
    """HTTP paths on the ESP32 controller"""
    UNLOCK = "/abrir_puerta"
    ALARM = "/alarma"
