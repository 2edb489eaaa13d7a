"""Sample game: loading, logo and game-play levels, the main application and its command."""