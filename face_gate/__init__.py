"""
Face Gate Application: root package.

This package contains the FastAPI app entry point (main.py), the face
comparison route, the access workflow, and the infrastructure clients for
AWS Rekognition, RabbitMQ and the door actuator device.
"""
