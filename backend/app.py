# backend/app.py
"""
Signal Simulator Backend API
FastAPI application exposing green-time planning and intersection simulation.
"""

from datetime import datetime
from typing import Any, Dict

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

# Import our custom modules
from config.settings import config
from utils.logger import get_logger
from utils.exceptions import StatisticsLogError, ValidationError
from utils.validators import (
    validate_cycle_count,
    validate_intersection_name,
    validate_lane_counts,
    validate_seed
)
from atcs.arrivals import ArrivalInjector
from atcs.intersection import create_intersection, seed_lanes
from atcs.optimizer import green_time, plan_greens
from atcs.simulate import run_simulation
from atcs.statistics import save_statistics, summarize

# Initialize logger
logger = get_logger("api")

app = FastAPI(
    title="Smart Signal Simulator API",
    description="Green-time planning and per-second simulation of a 4-lane intersection",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
def root():
    """API root endpoint with system information."""
    return {
        "name": "Smart Signal Simulator API",
        "version": "1.0.0",
        "status": "operational",
        "endpoints": {
            "config": "GET /config - Simulation settings",
            "green_time": "GET /green_time/{waiting} - Green time for a queue depth",
            "optimization": "POST /optimizer/plan - Green time for each lane",
            "simulate": "POST /simulate - Run cycles and return per-cycle state"
        },
        "description": "Simulate variable green allocation at a single four-lane intersection."
    }

@app.get("/health")
def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.utcnow().isoformat() + "Z",
        "version": "1.0.0"
    }

@app.get("/config")
def get_config():
    """Return the active simulation configuration."""
    return JSONResponse(config.to_dict())

@app.get("/green_time/{waiting}")
def get_green_time(waiting: int):
    """Green time a lane with `waiting` vehicles would receive."""
    if waiting < 0:
        raise HTTPException(status_code=400, detail="Waiting count cannot be negative")
    return {"waiting": waiting, "green_time": green_time(waiting)}

@app.post("/optimizer/plan")
def get_optimizer_plan(payload: Dict[str, Any]):
    """
    Green time for each lane given its current queue depth.
    payload = {"lanes": [2, 0, 5, 1]}
    """
    try:
        counts = validate_lane_counts(payload.get("lanes"), config.lane_count)
    except ValidationError as e:
        logger.warning(f"Rejected plan request: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    greens = plan_greens(counts)
    logger.info(f"Plan computed for {counts}: {greens}")
    return JSONResponse({
        "lanes": counts,
        "greens": {str(k): v for k, v in greens.items()},
        "cycle_length": sum(greens.values())
    })

@app.post("/simulate")
def simulate(payload: Dict[str, Any]):
    """
    Run a simulation and return the state before and after every cycle.
    payload = {
      "lanes": [2, 0, 5, 1],
      "cycles": 3,
      "seed": 42,          # optional
      "name": "Main_1",    # optional
      "persist": false     # append summary to the statistics log
    }
    """
    try:
        counts = validate_lane_counts(payload.get("lanes"), config.lane_count)
        cycles = validate_cycle_count(payload.get("cycles"), maximum=config.max_cycles_per_request)
        seed = validate_seed(payload.get("seed"))
        name = validate_intersection_name(payload.get("name", config.intersection_name),
                                          config.max_name_length)
    except ValidationError as e:
        logger.warning(f"Rejected simulation request: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    injector = ArrivalInjector(seed=seed)
    it = create_intersection(name)
    seed_lanes(it, counts)

    logger.info(f"API simulation: {cycles} cycles at '{name}' from {counts} (seed={injector.seed})")
    history = run_simulation(it, cycles, injector, emit=None)
    summary = summarize(it)

    response = {
        "name": it.name,
        "seed": injector.seed,
        "history": history,
        "final": it.snapshot(),
        "summary": summary.to_dict()
    }

    if payload.get("persist"):
        try:
            path = save_statistics(it, config.stats_file)
            response["stats_saved"] = True
            response["stats_file"] = str(path)
        except StatisticsLogError as e:
            logger.warning(f"Statistics not saved for API run: {e}")
            response["stats_saved"] = False
            response["stats_error"] = str(e)

    return JSONResponse(response)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.server_host, port=config.server_port)
