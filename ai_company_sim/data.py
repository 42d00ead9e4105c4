"""
AI Company Simulation — Catalog Tables
Research models by category, upgrades by type, and funding rounds.

Effect keys that are absent from a row mean "no effect". Model effects are
applied when training completes; upgrade effects when the upgrade is bought.
"""

from typing import Dict, List


# =============================================================================
# RESEARCH MODELS
# =============================================================================

LANGUAGE_MODELS: List[Dict] = [
    {
        "id": "gpt-1", "name": "GPT-1", "year": 2018, "parameters": "117M parameters",
        "description": "Generative pre-training proves that unlabeled text teaches language.",
        "cost": 150000, "compute_required": 120, "research_time": 20,
        "revenue_boost": 400, "research_boost": 0.05, "energy_cost": 5,
    },
    {
        "id": "gpt-2", "name": "GPT-2", "year": 2019, "parameters": "1.5B parameters",
        "description": "Coherent paragraphs spark a debate about staged release.",
        "cost": 600000, "compute_required": 300, "research_time": 35,
        "revenue_boost": 1200, "research_boost": 0.08, "energy_cost": 12,
    },
    {
        "id": "gpt-3", "name": "GPT-3", "year": 2020, "parameters": "175B parameters",
        "description": "Few-shot prompting turns a language model into a platform.",
        "cost": 3500000, "compute_required": 900, "research_time": 60,
        "revenue_boost": 4500, "research_boost": 0.1, "efficiency_boost": 1.1, "energy_cost": 40,
    },
    {
        "id": "gpt-4", "name": "GPT-4", "year": 2023, "parameters": "Undisclosed (est. 1.8T)",
        "description": "Multimodal reasoning passes professional exams.",
        "cost": 18000000, "compute_required": 2400, "research_time": 90,
        "revenue_boost": 15000, "research_boost": 0.15, "energy_cost": 120,
    },
    {
        "id": "gpt-5", "name": "GPT-5", "year": 2025, "parameters": "Undisclosed",
        "description": "Agentic assistants plan and execute multi-step work.",
        "cost": 80000000, "compute_required": 6000, "research_time": 120,
        "revenue_boost": 50000, "research_boost": 0.2, "efficiency_boost": 1.15, "energy_cost": 300,
    },
]

IMAGE_MODELS: List[Dict] = [
    {
        "id": "image-gpt", "name": "Image GPT", "year": 2020, "parameters": "6.8B parameters",
        "description": "Pixels predicted like tokens hint at a general recipe.",
        "cost": 400000, "compute_required": 250, "research_time": 30,
        "revenue_boost": 600, "research_boost": 0.03, "energy_cost": 8,
    },
    {
        "id": "dall-e", "name": "DALL-E", "year": 2021, "parameters": "12B parameters",
        "description": "Avocado armchairs become a cultural moment.",
        "cost": 2000000, "compute_required": 700, "research_time": 50,
        "revenue_boost": 2500, "research_boost": 0.05, "energy_cost": 25,
    },
    {
        "id": "dall-e-2", "name": "DALL-E 2", "year": 2022, "parameters": "3.5B parameters",
        "description": "Diffusion decoders deliver photorealistic edits.",
        "cost": 9000000, "compute_required": 1600, "research_time": 75,
        "revenue_boost": 8000, "research_boost": 0.07, "efficiency_boost": 1.05, "energy_cost": 60,
    },
    {
        "id": "dall-e-3", "name": "DALL-E 3", "year": 2023, "parameters": "Undisclosed",
        "description": "Prompt following improves with synthetic captions.",
        "cost": 30000000, "compute_required": 3200, "research_time": 100,
        "revenue_boost": 20000, "research_boost": 0.1, "energy_cost": 140,
    },
]

VIDEO_MODELS: List[Dict] = [
    {
        "id": "video-diffusion", "name": "Video Diffusion", "year": 2022, "parameters": "1.2B parameters",
        "description": "Short clips flicker into existence frame by frame.",
        "cost": 5000000, "compute_required": 1200, "research_time": 70,
        "revenue_boost": 5000, "research_boost": 0.05, "energy_cost": 50,
    },
    {
        "id": "sora", "name": "Sora", "year": 2024, "parameters": "Undisclosed",
        "description": "Minute-long scenes with persistent characters and physics.",
        "cost": 45000000, "compute_required": 4500, "research_time": 110,
        "revenue_boost": 30000, "research_boost": 0.12, "efficiency_boost": 1.1, "energy_cost": 220,
    },
    {
        "id": "sora-2", "name": "Sora 2", "year": 2025, "parameters": "Undisclosed",
        "description": "Synchronized sound and controllable cameras reach creators.",
        "cost": 120000000, "compute_required": 9000, "research_time": 140,
        "revenue_boost": 70000, "research_boost": 0.15, "energy_cost": 450,
    },
]

AUDIO_MODELS: List[Dict] = [
    {
        "id": "jukebox", "name": "Jukebox", "year": 2020, "parameters": "5B parameters",
        "description": "Raw audio generation sings in the style of famous artists.",
        "cost": 800000, "compute_required": 350, "research_time": 40,
        "revenue_boost": 900, "research_boost": 0.03, "energy_cost": 10,
    },
    {
        "id": "whisper", "name": "Whisper", "year": 2022, "parameters": "1.55B parameters",
        "description": "Robust speech recognition across ninety-nine languages.",
        "cost": 3000000, "compute_required": 800, "research_time": 55,
        "revenue_boost": 3500, "research_boost": 0.06, "efficiency_boost": 1.05, "energy_cost": 30,
    },
    {
        "id": "voice-engine", "name": "Voice Engine", "year": 2024, "parameters": "Undisclosed",
        "description": "Fifteen seconds of audio clone a natural voice.",
        "cost": 15000000, "compute_required": 2000, "research_time": 85,
        "revenue_boost": 12000, "research_boost": 0.08, "energy_cost": 90,
    },
]

WORLD_MODELS: List[Dict] = [
    {
        "id": "world-sim-alpha", "name": "World Sim Alpha", "year": 2025, "parameters": "Undisclosed",
        "description": "Interactive environments learned entirely from video.",
        "cost": 60000000, "compute_required": 7000, "research_time": 130,
        "revenue_boost": 40000, "research_boost": 0.2, "energy_cost": 350,
    },
    {
        "id": "embodied-agent", "name": "Embodied Agent", "year": 2026, "parameters": "Undisclosed",
        "description": "Robots rehearse in simulation before touching the real world.",
        "cost": 200000000, "compute_required": 15000, "research_time": 180,
        "revenue_boost": 120000, "research_boost": 0.25, "efficiency_boost": 1.2, "energy_cost": 800,
    },
    {
        "id": "general-world-model", "name": "General World Model", "year": 2028, "parameters": "Undisclosed",
        "description": "A single model predicts the physical and digital world.",
        "cost": 750000000, "compute_required": 40000, "research_time": 240,
        "revenue_boost": 400000, "research_boost": 0.3, "energy_cost": 2000,
    },
]

MODELS_BY_CATEGORY: Dict[str, List[Dict]] = {
    "language": LANGUAGE_MODELS,
    "image": IMAGE_MODELS,
    "video": VIDEO_MODELS,
    "audio": AUDIO_MODELS,
    "world": WORLD_MODELS,
}


# =============================================================================
# UPGRADES
# =============================================================================

COMPUTE_UPGRADES: List[Dict] = [
    {
        "id": "gpu-cluster", "name": "GPU Cluster",
        "description": "A rack of data-center GPUs wired with fast interconnect.",
        "cost": 200000, "compute_gain": 400, "energy_cost": 15,
    },
    {
        "id": "liquid-cooling", "name": "Liquid Cooling Retrofit",
        "description": "Direct-to-chip cooling lowers the facility power draw.",
        "cost": 350000, "compute_gain": 150, "energy_cost": -20,
    },
    {
        "id": "supercomputer", "name": "Azure Supercomputer",
        "description": "Ten thousand GPUs dedicated to frontier training runs.",
        "cost": 2500000, "compute_gain": 2000, "energy_cost": 80,
    },
    {
        "id": "hyperscale-campus", "name": "Hyperscale Campus",
        "description": "A purpose-built campus with its own substation.",
        "cost": 25000000, "compute_gain": 10000, "energy_cost": 400,
    },
    {
        "id": "stargate", "name": "Stargate Buildout",
        "description": "Gigawatt-scale clusters across multiple sites.",
        "cost": 150000000, "compute_gain": 40000, "energy_cost": 1500,
    },
]

RESEARCH_UPGRADES: List[Dict] = [
    {
        "id": "scaling-laws", "name": "Scaling Laws Team",
        "description": "Predict loss before spending the compute.",
        "cost": 300000, "research_boost": 0.15,
    },
    {
        "id": "rlhf", "name": "RLHF Pipeline",
        "description": "Human feedback aligns models with what users want.",
        "cost": 1200000, "research_boost": 0.25, "revenue_boost": 500,
    },
    {
        "id": "synthetic-data", "name": "Synthetic Data Engine",
        "description": "Models generate curricula for their successors.",
        "cost": 8000000, "research_boost": 0.4, "energy_cost": 30,
    },
]

REVENUE_UPGRADES: List[Dict] = [
    {
        "id": "api-platform", "name": "Developer API",
        "description": "Pay-per-token access for developers.",
        "cost": 250000, "revenue_boost": 700,
    },
    {
        "id": "chat-app", "name": "Consumer Chat App",
        "description": "A chat interface reaches a hundred million users.",
        "cost": 1500000, "revenue_boost": 3000, "energy_cost": 10,
    },
    {
        "id": "enterprise-tier", "name": "Enterprise Tier",
        "description": "Single sign-on, audit logs, and volume contracts.",
        "cost": 6000000, "revenue_boost": 9000,
    },
]

PARTNERSHIP_UPGRADES: List[Dict] = [
    {
        "id": "cloud-credits", "name": "Cloud Credits Deal",
        "description": "Discounted compute in exchange for exclusivity.",
        "cost": 400000, "expense_reduction": 0.2,
    },
    {
        "id": "strategic-partner", "name": "Strategic Partnership",
        "description": "A major software company distributes your models.",
        "cost": 5000000, "revenue_boost": 6000, "expense_reduction": 0.1,
    },
    {
        "id": "hardware-alliance", "name": "Custom Silicon Alliance",
        "description": "Co-designed accelerators cut training costs.",
        "cost": 40000000, "compute_gain": 5000, "expense_reduction": 0.15,
    },
]

UPGRADES_BY_TYPE: Dict[str, List[Dict]] = {
    "compute": COMPUTE_UPGRADES,
    "research": RESEARCH_UPGRADES,
    "revenue": REVENUE_UPGRADES,
    "partnerships": PARTNERSHIP_UPGRADES,
}


# =============================================================================
# FUNDING ROUNDS
# =============================================================================

FUNDING_ROUNDS: List[Dict] = [
    {
        "id": "seed-extension", "name": "Seed Extension", "amount": 1500000,
        "equity": "10% equity",
        "description": "Angels double down after the first demo.",
    },
    {
        "id": "series-a", "name": "Series A", "amount": 10000000,
        "equity": "20% equity",
        "description": "A top venture firm leads on the strength of the research roadmap.",
    },
    {
        "id": "capped-profit", "name": "Capped-Profit Round", "amount": 100000000,
        "equity": "100x return cap",
        "description": "A novel structure lets investors in while the mission stays in charge.",
    },
    {
        "id": "strategic-investment", "name": "Strategic Investment", "amount": 1000000000,
        "equity": "Cloud exclusivity",
        "description": "A hyperscaler invests largely in compute credits.",
    },
    {
        "id": "mega-round", "name": "Mega Round", "amount": 10000000000,
        "equity": "49% profit share",
        "description": "The largest private raise in technology history.",
    },
]
