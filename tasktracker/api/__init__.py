"""API роутеры сервиса задач"""
