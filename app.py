import asyncio
import json
import logging
import traceback

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from adapters.tg_files import mask_token
from adapters.tg_sender import send_actions_tg
from config import TG_WEBHOOK_SECRET, get_bot_token
from core.engine import build_reply_actions
from core.events import parse_update
from settings import HOST, LOG_LEVEL, PORT

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]

app = FastAPI()


@app.get("/health")
def health():
    return {"ok": True}


async def _process_update(req: Request, token: str) -> None:
    data = json.loads(await req.body())

    event = parse_update(data)
    logger.info("Inbound event: %s", type(event).__name__ if event else None)

    actions = await build_reply_actions(event, token)
    logger.info("Prepared responses: %d", len(actions))

    # отправляем синхронно: ошибка Telegram должна дойти до ответа вебхука
    if actions:
        await asyncio.to_thread(send_actions_tg, event.chat_id, actions, token)


async def handle_webhook(req: Request) -> Response:
    logger.info("Request received: method=%s path=%s", req.method, req.url.path)

    if req.method == "OPTIONS":
        return Response(headers=CORS_HEADERS)

    if req.method != "POST":
        return PlainTextResponse("Method Not Allowed", status_code=405, headers=CORS_HEADERS)

    token = ""
    try:
        token = get_bot_token()
        await _process_update(req, token)
    except Exception as e:
        # ошибки requests содержат URL с токеном, наружу и в лог он попасть не должен
        error = mask_token(str(e), token)
        stack = mask_token(traceback.format_exc(), token)
        logger.error("Error processing request: %s", stack)
        return JSONResponse(
            {"error": error, "stack": stack},
            status_code=500,
            headers=CORS_HEADERS,
        )

    return PlainTextResponse("OK", headers=CORS_HEADERS)


@app.api_route("/", methods=ALL_METHODS)
async def root_webhook(req: Request):
    return await handle_webhook(req)


@app.api_route("/tg/{secret}", methods=ALL_METHODS)
async def tg_webhook(secret: str, req: Request):
    if TG_WEBHOOK_SECRET and secret != TG_WEBHOOK_SECRET:
        return PlainTextResponse("forbidden", status_code=403)
    return await handle_webhook(req)


def main() -> None:
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
