# src/mqtt/client.py
import json

import paho.mqtt.client as mqtt
from paho.mqtt.client import CallbackAPIVersion

import config
from app_logging import log_info, log_err


def _reason_from_args(args):
    """
    v2 callbacks arrive as either
    - (flags, reason_code, properties)  [5-arg form]
    - (reason_code, properties)         [4-arg form]
    """
    if len(args) >= 3:
        return args[1]
    if args:
        return args[0]
    return None


class FramePublisher:
    """Publishes decoded DNP3 frames as JSON over MQTT (paho-mqtt 2.x)."""

    def __init__(self, broker=None, port=None, topic=None, client_id=None,
                 username=None, password=None, keepalive=None):
        self.broker = broker or config.MQTT_BROKER
        self.port = port or config.MQTT_PORT
        self.topic = topic or config.MQTT_TOPIC
        self.client_id = client_id or config.MQTT_CLIENT_ID
        self.username = config.MQTT_USERNAME if username is None else username
        self.password = config.MQTT_PASSWORD if password is None else password
        self.keepalive = keepalive or config.MQTT_KEEPALIVE
        self.connected = False
        self._client = None

    def connect(self):
        """Start the network loop. Returns False if the client could not be set up."""
        try:
            c = mqtt.Client(
                CallbackAPIVersion.VERSION2,
                client_id=self.client_id,
                clean_session=True,
            )
            c.reconnect_delay_set(min_delay=1, max_delay=30)
            if self.username:
                c.username_pw_set(self.username, self.password)

            c.on_connect = self._on_connect
            c.on_disconnect = self._on_disconnect

            c.connect(self.broker, self.port, self.keepalive)
            c.loop_start()
            self._client = c
            return True
        except (OSError, ValueError) as e:
            log_err(f"MQTT init error: {e}")
            return False

    def _on_connect(self, client, userdata, *args):
        reason_code = _reason_from_args(args)
        self.connected = reason_code == 0
        if self.connected:
            log_info(f"MQTT connected to {self.broker}:{self.port}")
        else:
            log_err(f"MQTT connect failed: {reason_code}")

    def _on_disconnect(self, client, userdata, *args):
        self.connected = False
        log_err(f"MQTT disconnected: {_reason_from_args(args)}")

    def publish(self, payload):
        """Publish a JSON payload at QoS 1. Returns True on success, False otherwise."""
        if not self._client:
            log_err("MQTT publish failed: client not initialized")
            return False
        try:
            result = self._client.publish(self.topic, json.dumps(payload), qos=1)
        except (OSError, ValueError) as e:
            log_err(f"MQTT publish error: {e}")
            return False
        return getattr(result, "rc", None) == mqtt.MQTT_ERR_SUCCESS

    def close(self):
        if not self._client:
            return
        self._client.loop_stop()
        self._client.disconnect()
        self._client = None
