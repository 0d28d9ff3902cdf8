from typing import List

from app.models import Game

SAMPLE_GAMES: List[Game] = [
    Game(
        id=1,
        title="GTA: San Andreas",
        genre="Action Adventure",
        price=19.99,
        platform="PS2, PS3, PS4, Xbox 360",
        img_reference="images/gtasanandreas.jpeg",
        release_date="October 26, 2004",
        description=(
            "Grand Theft Auto: San Andreas puts you in the shoes of Carl 'CJ' Johnson "
            "as he returns home to Los Santos in the early '90s, only to be pulled back "
            "into gang wars, family struggles, and corrupt law enforcement."
        ),
    ),
    Game(
        id=2,
        title="Devil May Cry",
        genre="Action/Hack and Slash",
        price=29.99,
        platform="PS2, PS3, PS4, Xbox One, PC",
        img_reference="images/devilmaycry.jpeg",
        release_date="August 23, 2001",
        description=(
            "Step into the boots of Dante, a demon hunter with supernatural abilities "
            "and an arsenal of powerful weapons. Navigate through gothic environments "
            "filled with challenging puzzles and intense combat encounters."
        ),
    ),
    Game(
        id=3,
        title="NBA 2K26",
        genre="Sports/Basketball Simulation",
        price=69.99,
        platform="PS5, PS4, Xbox Series X/S, Xbox One, PC",
        img_reference="images/2k.jpeg",
        release_date="September 6, 2025",
        description=(
            "Experience basketball like never before with NBA 2K26, featuring "
            "cutting-edge graphics, realistic player movements, and enhanced AI. "
            "Build your MyCareer from rookie to superstar."
        ),
    ),
    Game(
        id=4,
        title="Marvel Ultimate Alliance",
        genre="Action RPG",
        price=39.99,
        platform="PC, PS2, PS3, PS4, Xbox One, Xbox 360",
        img_reference="images/marvel.jpeg",
        release_date="October 24, 2006",
        description=(
            "Assemble your ultimate team of Marvel superheroes and save the universe "
            "in this action-packed RPG. Choose from over 20 playable characters "
            "including Spider-Man, Wolverine, Captain America, and more."
        ),
    ),
    Game(
        id=5,
        title="EA College Football 26",
        genre="Sports/Football Simulation",
        price=69.99,
        platform="PS5, PS4, Xbox Series X/S, Xbox One, PC",
        img_reference="images/ncaa26.jpeg",
        release_date="July 19, 2025",
        description=(
            "Experience the passion and pageantry of college football with over 134 "
            "FBS schools, authentic stadiums, and real college traditions."
        ),
    ),
    Game(
        id=6,
        title="Elden Ring Nightreign",
        genre="Action RPG/Souls-like",
        price=59.99,
        platform="PS5, PS4, Xbox Series X/S, Xbox One, PC",
        img_reference="images/eldenring.jpeg",
        release_date="2025",
        description=(
            "Return to the Lands Between in this standalone cooperative experience set "
            "in the world of Elden Ring. Face the encroaching Nightreign in a "
            "three-player session-based adventure."
        ),
    ),
    Game(
        id=7,
        title="X-Men Legends",
        genre="Action RPG",
        price=29.99,
        platform="PS2, Xbox, GameCube",
        img_reference="images/xmen.jpg",
        release_date="September 21, 2004",
        description=(
            "Join the X-Men in their first action-RPG adventure. Assemble a team of "
            "iconic mutants like Wolverine, Cyclops, Storm, and Jean Grey to combat "
            "Magneto's Brotherhood of Mutants."
        ),
    ),
    Game(
        id=8,
        title="X-Men Legends 2",
        genre="Action RPG",
        price=34.99,
        platform="PS2, Xbox, GameCube, PC, PSP",
        img_reference="images/xmen2.jpg",
        release_date="September 20, 2005",
        description=(
            "The X-Men must join forces with Magneto's Brotherhood to stop the rise of "
            "the ancient mutant Apocalypse. Featuring over 20 playable characters."
        ),
    ),
]
