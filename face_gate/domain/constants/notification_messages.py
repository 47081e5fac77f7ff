"""Fixed notification texts published to the queue"""


class NotificationMessages:
    """Message strings sent with the client's notification token"""
    DOOR_OPENED = "Puerta abierta"
    ALARM_TRIGGERED = "Alarma activada"
