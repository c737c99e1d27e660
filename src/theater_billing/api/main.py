from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, StrictInt
from typing import Dict, List, Optional
import sys
from pathlib import Path

# Add src to path for internal imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from theater_billing import __version__
from theater_billing.engine import Invoice, Performance, Play, StatementError, format_currency
from theater_billing.api.state import builder, plays as bundled_plays

app = FastAPI(
    title="Theater Billing API",
    description="Statements and volume credits for theatrical performances",
    version=__version__
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class PlayIn(BaseModel):
    name: str
    type: str


class PerformanceIn(BaseModel):
    playID: str
    # No coercion of true, "55" or 30.0 into seat counts
    audience: StrictInt


class StatementRequest(BaseModel):
    customer: str
    performances: List[PerformanceIn] = []
    # Falls back to the bundled play table when omitted
    plays: Optional[Dict[str, PlayIn]] = None


@app.get("/")
async def root():
    return {"status": "online", "message": "Theater Billing API Active"}


@app.get("/plays")
async def get_plays():
    return {
        play_id: {"name": play.name, "type": play.type}
        for play_id, play in bundled_plays.items()
    }


@app.post("/statement")
async def create_statement(req: StatementRequest):
    invoice = Invoice(
        customer=req.customer,
        performances=[Performance(play_id=p.playID, audience=p.audience) for p in req.performances]
    )
    if req.plays is None:
        plays = bundled_plays
    else:
        plays = {play_id: Play(name=p.name, type=p.type) for play_id, p in req.plays.items()}

    try:
        statement = builder.build(invoice, plays)
    except StatementError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        import traceback
        print(traceback.format_exc())
        raise HTTPException(status_code=500, detail=str(e))

    return {
        "text": builder.render_text(statement),
        "total_formatted": format_currency(statement.total_amount, builder.currency),
        "statement": statement.to_dict(),
    }
