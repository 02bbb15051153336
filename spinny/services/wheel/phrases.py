"""
Spinny - Weekly Phrases
=======================

Send-off lines posted when the weekly winner's roles are updated.

Author: Spinny Team
"""

import random
from typing import Optional


WEEKLY_PHRASES = [
    "Don't waste the cosmic favour, pig.",
    "You better not fuck us!",
    "May your RNG be kind and your drops be clean, piggy.",
    "May your pitch drop be legendary and your mesos never vanish.",
    "Poggers! May your boss drops crit every time.",
    "Oink oink — may your rolls be blessed.",
    "May your star force be gold, and your comms not be mold.",
    "Don't gimp the party, oinker.",
    "May your cubes hit god-tier potential.",
    "May your drop table pity you this week.",
    "Keep chugging pots and critting bosses, pig.",
    "May your mesos stack and your lag be small.",
    "May your epic drop be non-shitter and very pog.",
    "You got the piggy touch — don't blow it, legend.",
    "May your stars align and your flame not fizzle.",
    "May gachas be merciful and your RNG not betray you.",
    "Oink if you score a pitch drop before breakfast.",
    "May your runs be clean and your drop not mean.",
    "May your drop rates be blessed by the RNG gods.",
    "Feed the pig right — it returns you epic loot.",
    "May your cubes bless you with Godly lines, piggy.",
    "Less mold, more pog — good drops incoming.",
    "May your scrolling be safe and your flames peak.",
    "Gamblers never quit, and quitters never win.",
    "Pigs — may your star force upgrades never fail.",
    "You lucky oinker.",
    "This week: big pig energy, bigger drops, no shitter RNG.",
    "Luck is a pig — fatten it with patience, don't let it hog your reason.",
    "Gamble like a pig: snuffle for opportunity, celebrate the tasty drops.",
    "RNG is just the universe's mood swing; feed it treats and it might smile.",
    "A pitch drop is a prayer answered by statistics and a little pork luck.",
    "Mesos come and go; the true fortune is not losing your hog soul to rage.",
    "Feed the pig of chance with runs and potions; it returns in blessed drops.",
    "Star force is faith measured in scrolls — upgrade your courage, not your anger.",
    "The gambler's zen: accept the shitter drops, cherish the pog ones.",
    "Pigs don't worry about misses — they root for the next big crit.",
    "Cubes are tiny boxes of destiny; open them with reverence and snacks.",
    "Luck prefers the persistent pig over the panicked hoarder.",
    "A true pig knows: RNG is theater — play your part and enjoy the applause.",
    "Blessed is the pig who grinds in silence and gets pitch drops loudly.",
    "You can't bribe probability, but you can cultivate rituals that feel lucky.",
    "May your mesos flow like a river and your inventories never choke.",
    "The wise pig treats every failure as practice for the next pog moment.",
    "In the casino of life, pigs wager hope and harvest stories.",
    "Don't curse the RNG; teach it to love you with sacrifice and memes.",
    "A lucky pig is humble — it knows tomorrow the table will tilt again.",
    "Pog is a state of mind; drops are merely the currency of validation.",
    "Oink at fate, then grind harder — sometimes noise is the ritual it respects.",
    "Gambling teaches patience; pigs learn to wait between snacks and jackpots.",
    "Fortune is flattered by persistence and occasionally bribed with effort.",
    "The pig who chases every drop ends up hungry; the patient pig eats well.",
    "If life deals you shitter RNG, season it with humor and call it a weird flex.",
]


def random_phrase(rng: Optional[random.Random] = None) -> str:
    """Pick one send-off line."""
    source = rng if rng is not None else random
    return source.choice(WEEKLY_PHRASES)
