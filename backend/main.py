"""
Taskmap Backend - FastAPI + Socket.io entry point.
Serves the project dependency map to the dashboard frontend.
"""

import os

import socketio
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from api import register_routes

# Socket.io
sio = socketio.AsyncServer(async_mode="asgi", cors_allowed_origins="*")
app = FastAPI(title="Taskmap Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_routes(app, sio)


@app.get("/health")
async def health():
    return {"status": "ok"}


# Socket.io events
@sio.event
async def connect(sid, environ, auth):
    logger.info("Client connected: {}", sid)


@sio.event
def disconnect(sid):
    logger.info("Client disconnected: {}", sid)


# ASGI app for uvicorn (Socket.io + FastAPI)
asgi_app = socketio.ASGIApp(sio, app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(asgi_app, host=os.environ.get("HOST", "127.0.0.1"), port=int(os.environ.get("PORT", "3001")))
