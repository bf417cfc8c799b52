#!/usr/bin/env python3
"""Simple script to run the application with the settings from config.yml."""
from weather_service.main import run

if __name__ == "__main__":
    run()
