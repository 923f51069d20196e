"""App: núcleo do dispatcher.

Subpastas:
- bootstrap/: inicialização de logging e validação de settings
- dispatch/: registry de handlers e router
- protocols/: modelo canônico, erros e contratos
- observability/: correlation_id
- constants/: tipos e kinds do WhatsApp

Módulos:
- bot.py: BotBuilder / WhatsAppBot
- app.py: fábrica FastAPI
"""
