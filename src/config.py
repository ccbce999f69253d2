import os
import socket

# DNP3 over TCP/UDP
DNP3_PORT = 20000

# MQTT
MQTT_BROKER = os.environ.get("DNP3_MQTT_BROKER", "localhost")
MQTT_PORT = int(os.environ.get("DNP3_MQTT_PORT", "1883"))
MQTT_TOPIC = os.environ.get("DNP3_MQTT_TOPIC", "dnp3/frames")
MQTT_CLIENT_ID = f"dnp3-sniffer-{socket.gethostname()}"
MQTT_USERNAME = os.environ.get("DNP3_MQTT_USERNAME", "")
MQTT_PASSWORD = os.environ.get("DNP3_MQTT_PASSWORD", "")
MQTT_KEEPALIVE = 60

# Report output
DEFAULT_FORMAT = "json"
JSON_INDENT = 2
