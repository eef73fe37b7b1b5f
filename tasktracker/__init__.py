#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Task Tracker - HTTP сервис задач

Версия: 1.0.0
Дата: 2026-10-18
"""

__version__ = "1.0.0"
