import asyncio
import websockets
import json
import sys
import subprocess
import os
import time
import httpx

BASE_URL = "http://127.0.0.1:8000"
WS_URL = "ws://127.0.0.1:8000/ws/subscribe"

def check_backend():
    try:
        r = httpx.get(f"{BASE_URL}/health", timeout=2)
        return r.status_code == 200
    except httpx.HTTPError:
        return False

def start_backend():
    print("Starting temporary backend...")
    p = subprocess.Popen([sys.executable, "-m", "uvicorn", "launchwatch.main:app", "--host", "127.0.0.1", "--port", "8000"],
                         cwd=os.path.join(os.getcwd(), "backend"),
                         stdout=subprocess.PIPE,
                         stderr=subprocess.PIPE)
    for i in range(20):
        if check_backend():
            print("Backend started.")
            return p
        time.sleep(1)
    print("Backend failed to start.")
    return None

async def verify_live_comments():
    httpx.post(f"{BASE_URL}/api/v1/launches/seed", timeout=5)
    launches = httpx.get(f"{BASE_URL}/api/v1/launches/", timeout=5).json()
    launch_id = launches[0]["id"]
    guest = httpx.post(f"{BASE_URL}/api/v1/auth/anonymous", timeout=5).json()
    headers = {"Authorization": f"Bearer {guest['access_token']}"}

    print(f"Connecting to {WS_URL}...")
    try:
        async with websockets.connect(WS_URL) as websocket:
            await websocket.send(json.dumps({
                "type": "subscribe",
                "id": "comments",
                "query": "comments.by_launch",
                "args": {"launch_id": launch_id},
            }))
            initial = json.loads(await asyncio.wait_for(websocket.recv(), timeout=5.0))
            print(f"Initial result: {len(initial['data'])} comments on '{launches[0]['name']}'")

            async with httpx.AsyncClient() as client:
                resp = await client.post(
                    f"{BASE_URL}/api/v1/launches/{launch_id}/comments",
                    json={"content": "verify_subscriptions was here"},
                    headers=headers,
                )
                resp.raise_for_status()

            update = json.loads(await asyncio.wait_for(websocket.recv(), timeout=5.0))
            print(f"Pushed update: {len(update['data'])} comments, newest by {update['data'][0]['user_name']}")
            print("\nSubscription test PASSED.")

    except (OSError, asyncio.TimeoutError, websockets.WebSocketException, httpx.HTTPError) as e:
        print(f"\nSubscription test FAILED: {e}")

if __name__ == "__main__":
    server_process = None
    if not check_backend():
        server_process = start_backend()

    if check_backend():
        asyncio.run(verify_live_comments())
    else:
        print("Could not connect to backend.")

    if server_process:
        print("Stopping temporary backend...")
        server_process.terminate()
