"""
title_dictionaries.py - Universal gaming dictionaries for the title optimizer

Every table is priority ordered: earlier entries win when a title mentions
more than one of them.
"""

import re

# 1. RARE ITEMS (Priority 1 for Hero Slot)
# Matched as case-insensitive substrings, so "Maus" also hits longer tokens.
HIGH_VALUE_ITEMS = (
    # --- SHOOTERS (Val/CS/Fortnite/Apex) ---
    "Kuronami", "Reaver", "Elderflame", "Prelude", "Araxys", "Glitchpop", "Prime", "Oni", "Singularity",
    "Spectrum", "Champions", "Arcane", "Sheriff", "Vandal", "Phantom", "Operator", "Butterfly", "Karambit",
    "Rgx", "Xenohunter", "Imperium", "Neo Frontier", "Gaia", "Mystbloom",
    "Dragon Lore", "Gungnir", "Prince", "Howl", "Fire Serpent", "Medusa", "Lotus", "Sapphire", "Ruby", "Emerald",
    "Doppler", "Fade", "Tiger Tooth", "Marble Fade", "Case Hardened", "Gloves", "Knives", "Bayonet", "Talon",
    "Skeleton", "Nomad", "Ursus", "Navaja", "Stiletto", "Paracord", "Survival", "Classic Knife",
    "Travis Scott", "Deadpool", "Peter Griffin", "Black Knight", "Ikonik", "Galaxy", "Glow", "Wonder",
    "Wildcat", "Renegade Raider", "Aerial Assault", "Ghoul Trooper", "Skull Trooper", "The Reaper",
    "John Wick", "Minty", "Leviathan", "Raiders Revenge", "Sparkle Specialist", "Royale Bomber",
    "Double Helix", "Honor Guard", "Stealth Reflex",
    "Heirloom", "Katar", "Buster Sword", "Final Fantasy",

    # --- MOBA / RPG (LoL/Genshin/Dota) ---
    "C6", "R5", "Arlecchino", "Furina", "Neuvillette", "Raiden", "Zhongli", "Nahida", "Yelan", "Hu Tao",
    "Kazuha", "Xiao", "Ayaka", "Archon",
    "Pax", "Soulstealer", "Prestige", "Hextech", "God King", "Elementalist", "Spirit Blossom", "Ufo Corki",
    "King Rammus", "Rusty Blitzcrank", "Championship Riven", "Arcana", "Persona",

    # --- SUPERCELL (CoC/CR/Brawl) ---
    "Hypercharge", "Mecha", "Phoenix Crow", "Star Shelly", "Gold Mecha", "Virus 8-Bit",
    "Pixel Skin", "Scenery", "Magic Items", "Hammer",
    "Evolution", "Evo", "Elite Wild Cards", "Level 15", "Maxed Deck", "20 Wins",

    # --- ROBLOX / MINECRAFT ---
    "Korblox", "Headless", "Violet Valk", "Dominus", "Valkyrie", "Limiteds", "Extreme Headphones",
    "Blue Clockwork", "Sparkle Time", "Blox Fruits", "Kitsune", "Leopard", "Dragon", "Perm",
    "Minecon", "Optifine Cape", "Lunar Cape", "Badlion Cape", "MVP+", "MVP++", "Hypixel", "Skyblock",
    "Hyperion", "Terminator", "Gdrag", "Golden Dragon",

    # --- TANKS / MILITARY (WoT/War Thunder) ---
    "Object 279e", "T95/FV4201", "Chieftain", "Object 907", "VK 72.01", "Carro 45t", "Concept 1B",
    "Kpfpz 50t", "Type 59", "EBR 75", "Bourrasque", "Progetto 46", "BZ-176", "Waffentager",
    "Maus", "IS-7",

    # --- GENERAL / STEAM ---
    "Steam Level", "Year Badge", "Years of Service", "No Vac", "Prime Status",
    "GTA V", "RDR2", "Cyberpunk", "Elden Ring", "Baldurs Gate 3", "God of War", "FIFA", "FC 24",
    "NBA 2K", "Call of Duty", "MW3", "Black Ops",
)

# 2. RANKS (Priority 2 for Hero Slot)
# Matched as whole words.
RANKS = (
    # Valorant / LoL / TFT / WR
    "Radiant", "Immortal", "Ascendant", "Diamond", "Platinum", "Plat", "Gold", "Silver", "Bronze", "Iron",
    "Challenger", "Grandmaster", "Master", "Emerald",
    # CS2 / Faceit
    "Global Elite", "Supreme Master First Class", "SMFC", "LEM", "Eagle", "DMG", "Faceit 10", "Faceit Lvl 10",
    # Fortnite / Apex / Rocket League
    "Unreal", "Elite", "Champion", "Supersonic Legend", "SSL", "Grand Champion", "GC3", "GC2", "GC1",
    "Apex Predator", "Predator", "Top 500",
    # Clash / Brawl
    "Legends League", "Titan League", "Ultimate Champion", "Royal Champion", "Masters", "Legendary", "Mythic",
    # WoT
    "Unicum", "Super Unicum",
)

# 3. SPECIAL GAME METRICS
# (label, pattern, rendering style). Styles are resolved by the optimizer:
#   compact -> "TH16" / "TIERIX", title -> "Level 15", amount -> "50K Robux"
METRIC_PATTERNS = (
    ("TH", re.compile(r"\bTH\s*(\d+)\b", re.IGNORECASE), "compact"),                        # Clash of Clans Town Hall
    ("BH", re.compile(r"\bBH\s*(\d+)\b", re.IGNORECASE), "compact"),                        # Builder Hall
    ("Tier", re.compile(r"\bTier\s*(X|10|IX|9|VIII|8)\b", re.IGNORECASE), "compact"),       # World of Tanks
    ("Lvl", re.compile(r"\b(Level|Lvl)\s*(\d+)\b", re.IGNORECASE), "title"),                # Generic Level (CR/RPG)
    ("Trophies", re.compile(r"\b(\d+)\s*(Trophies|Cups)\b", re.IGNORECASE), "title"),       # Brawl/Clash
    ("Wins", re.compile(r"\b(\d+)\s*Wins\b", re.IGNORECASE), "title"),                      # CR/Fortnite
    ("Robux", re.compile(r"\b(\d+)[\.,]?\d*k?\s*(Robux|Rap)\b", re.IGNORECASE), "amount"),  # Roblox
    ("Currency", re.compile(r"\b(\d+)[\.,]?\d*k?\s*(V-?Bucks|Gems|Gold|Elixir)\b", re.IGNORECASE), "amount"),
)

# 4. GENERIC COUNTS ("57 Skins", "120 Champs", "30 Lvl")
COUNT_PATTERN = re.compile(
    r"\b(\d+)\+?\s*(skins?|champs?|champions?|agents?|brawlers?|knives|gloves|games?|wins?|lvl|level|ar)\b",
    re.IGNORECASE,
)

# 5. WORDS TO REMOVE (Strictly Redundant Access Terms only)
# Longer phrases first so "full access" goes before "access".
REMOVAL_KEYWORDS = (
    "full access", "fa", "full ownership", "access", "email change", "mail change",
    "changeable", "original mail", "oge", "ownership", "verified",
)

# Kept fully upper-case when title-casing.
UPPER_ACRONYMS = frozenset({
    "CS2", "CSGO", "LOL", "NA", "EU", "OCE", "ASIA", "KR", "TR", "RU", "BR", "LATAM", "OG", "PBE", "AR",
    "MR", "PC", "PSN", "XBOX", "TH", "BH", "SSL", "GC", "MVP", "FC", "MW3", "GTA", "RDR2",
})

# Secondary slot values that carry no information on their own.
PLACEHOLDER_DETAILS = frozenset({"Full Access", "Rare", "Maxed"})
