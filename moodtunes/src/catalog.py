"""Catálogo mock de pistas, usado cuando el proveedor en vivo no responde.

Particionado por variante (``general``, ``country``, ``spanish``) y emoción
dominante. Cada fila es ``(id, title, artist, album, genre)``.
"""

from typing import Dict, List, Tuple

from .models import TrackRecommendation


GENERAL = "general"
COUNTRY = "country"
SPANISH = "spanish"
CATALOG_VARIANTS = (GENERAL, COUNTRY, SPANISH)

DEFAULT_EMOTION = "joy"

Row = Tuple[int, str, str, str, str]

MOCK_CATALOG: Dict[str, Dict[str, List[Row]]] = {
    SPANISH: {
        "joy": [
            (1, "Despacito", "Luis Fonsi ft. Daddy Yankee", "Vida", "Reggaeton"),
            (2, "La Gozadera", "Gente de Zona ft. Marc Anthony", "Visualízate", "Salsa"),
            (3, "Danza Kuduro", "Don Omar ft. Lucenzo", "Meet the Orphans", "Reggaeton"),
            (4, "Gasolina", "Daddy Yankee", "Barrio Fino", "Reggaeton"),
            (5, "Bamboléo", "Gipsy Kings", "Gipsy Kings", "Rumba Flamenca"),
            (6, "Macarena", "Los Del Rio", "A mí me gusta", "Latin Pop"),
            (7, "Vivir Mi Vida", "Marc Anthony", "3.0", "Salsa"),
            (8, "Bailando", "Enrique Iglesias", "Sex and Love", "Latin Pop"),
            (9, "La Vida Es Una Fiesta", "Manu Chao", "Próxima Estación: Esperanza", "Latin Alternative"),
            (10, "Propuesta Indecente", "Romeo Santos", "Fórmula, Vol. 2", "Bachata"),
        ],
        "sadness": [
            (11, "Obsesión", "Aventura", "We Broke the Rules", "Bachata"),
            (12, "Bésame Mucho", "Consuelo Velázquez", "Clásicos", "Bolero"),
            (13, "Lágrimas Negras", "Bebo Valdés & Diego El Cigala", "Lágrimas Negras", "Son Cubano"),
            (14, "Como Quien Pierde Una Estrella", "Alejandro Fernández", "Me Estoy Enamorando", "Ranchera"),
            (15, "Si No Te Hubieras Ido", "Marco Antonio Solís", "Trozos de Mi Alma", "Balada"),
            (16, "El Cuarto de Tula", "Buena Vista Social Club", "Buena Vista Social Club", "Son Cubano"),
            (17, "Amor Eterno", "Juan Gabriel", "Recuerdos II", "Ranchera"),
            (18, "La Llorona", "Lila Downs", "Border", "Folk Mexicano"),
            (19, "Corazón Partío", "Alejandro Sanz", "Más", "Latin Pop"),
            (20, "Sin Ti", "Maná", "Falta Amor", "Latin Rock"),
        ],
        "anger": [
            (21, "Safaera", "Bad Bunny", "YHLQMDLG", "Trap Latino"),
            (22, "Ella Quiere Beber", "Anuel AA", "Real Hasta la Muerte", "Trap Latino"),
            (23, "Con Altura", "Rosalía ft. J Balvin", "Single", "Latin Trap"),
            (24, "Mala Mía", "Maluma", "11:11", "Reggaeton"),
            (25, "Que Tire Pa Lante", "Daddy Yankee", "Con Calma & Mis Grandes Éxitos", "Reggaeton"),
            (26, "Loco", "Enrique Iglesias ft. Romeo Santos", "Sex and Love", "Latin Pop"),
            (27, "Rata de Dos Patas", "Paquita la del Barrio", "Sus Grandes Éxitos", "Ranchera"),
            (28, "Fuego", "Eleni Foureira", "Single", "Latin Pop"),
            (29, "Dale Don Dale", "Don Omar", "The Last Don", "Reggaeton"),
            (30, "Bandolero", "Don Omar ft. Tego Calderón", "King of Kings", "Reggaeton"),
        ],
        "fear": [
            (31, "Te Recuerdo Amanda", "Víctor Jara", "Te Recuerdo Amanda", "Nueva Canción"),
            (32, "La Maza", "Silvio Rodríguez", "Días y Flores", "Nueva Trova"),
            (33, "Ojalá", "Silvio Rodríguez", "Días y Flores", "Nueva Trova"),
            (34, "Volver a los 17", "Violeta Parra", "Las Últimas Composiciones", "Folk Chileno"),
            (35, "Alfonsina y el Mar", "Mercedes Sosa", "Gracias a la Vida", "Folk Argentino"),
            (36, "Como la Cigarra", "Mercedes Sosa", "Como la Cigarra", "Folk Argentino"),
            (37, "Canción con Todos", "Mercedes Sosa", "Homenaje a Violeta Parra", "Folk Argentino"),
            (38, "El Aparecido", "Víctor Jara", "Canto Libre", "Nueva Canción"),
            (39, "Unicornio", "Silvio Rodríguez", "Al Final de Este Viaje", "Nueva Trova"),
            (40, "La Era Está Pariendo un Corazón", "Silvio Rodríguez", "Días y Flores", "Nueva Trova"),
        ],
    },
    COUNTRY: {
        "joy": [
            (41, "Life is a Highway", "Rascal Flatts", "Me and My Gang", "Country"),
            (42, "Wagon Wheel", "Darius Rucker", "True Believers", "Country"),
            (43, "Chicken Fried", "Zac Brown Band", "The Foundation", "Country"),
            (44, "Cruise", "Florida Georgia Line", "Here's to the Good Times", "Country"),
            (45, "God's Country", "Blake Shelton", "Fully Loaded: God's Country", "Country"),
            (46, "Sweet Home Alabama", "Lynyrd Skynyrd", "Second Helping", "Southern Rock"),
            (47, "Tennessee Whiskey", "Chris Stapleton", "Traveller", "Country"),
            (48, "Body Like a Back Road", "Sam Hunt", "Montevallo", "Country Pop"),
            (49, "Knee Deep", "Zac Brown Band ft. Jimmy Buffett", "You Get What You Give", "Country"),
            (50, "Friends in Low Places", "Garth Brooks", "No Fences", "Country"),
        ],
        "sadness": [
            (51, "The Dance", "Garth Brooks", "Garth Brooks", "Country"),
            (52, "Hurt", "Johnny Cash", "American IV: The Man Comes Around", "Country"),
            (53, "Whiskey Lullaby", "Brad Paisley ft. Alison Krauss", "Mud on the Tires", "Country"),
            (54, "Tears in Heaven", "Eric Clapton", "Rush Soundtrack", "Country Rock"),
            (55, "Go Rest High on That Mountain", "Vince Gill", "When I Call Your Name", "Country"),
            (56, "I Hope You Dance", "Lee Ann Womack", "I Hope You Dance", "Country"),
            (57, "Live Like You Were Dying", "Tim McGraw", "Live Like You Were Dying", "Country"),
            (58, "Concrete Angel", "Martina McBride", "Greatest Hits", "Country"),
            (59, "He Stopped Loving Her Today", "George Jones", "I Am What I Am", "Country"),
            (60, "Alyssa Lies", "Jason Michael Carroll", "Waitin' in the Country", "Country"),
        ],
        "anger": [
            (61, "Before He Cheats", "Carrie Underwood", "Some Hearts", "Country"),
            (62, "Goodbye Earl", "Dixie Chicks", "Fly", "Country"),
            (63, "Gunpowder & Lead", "Miranda Lambert", "Crazy Ex-Girlfriend", "Country"),
            (64, "Two Black Cadillacs", "Carrie Underwood", "Blown Away", "Country"),
            (65, "White Liar", "Miranda Lambert", "Revolution", "Country"),
            (66, "Somebody Like You", "Keith Urban", "Golden Road", "Country"),
            (67, "Picture to Burn", "Taylor Swift", "Taylor Swift", "Country Pop"),
            (68, "Should've Been a Cowboy", "Toby Keith", "Toby Keith", "Country"),
            (69, "Redneck Woman", "Gretchen Wilson", "Here for the Party", "Country"),
            (70, "Country Boys", "Little Big Town", "The Road to Here", "Country"),
        ],
        "fear": [
            (71, "Amazing Grace", "Alan Jackson", "Precious Memories", "Country Gospel"),
            (72, "I Can Only Imagine", "MercyMe", "Almost There", "Christian Country"),
            (73, "Jesus, Take the Wheel", "Carrie Underwood", "Some Hearts", "Country"),
            (74, "Holes in the Floor of Heaven", "Steve Wariner", "Burnin' the Roadhouse Down", "Country"),
            (75, "Three Wooden Crosses", "Randy Travis", "Rise and Shine", "Country"),
            (76, "There Goes My Life", "Kenny Chesney", "When the Sun Goes Down", "Country"),
            (77, "Godspeed", "Dixie Chicks", "Home", "Country"),
            (78, "In Color", "Jamey Johnson", "That Lonesome Song", "Country"),
            (79, "If Tomorrow Never Comes", "Garth Brooks", "Garth Brooks", "Country"),
            (80, "The Night the Lights Went Out in Georgia", "Reba McEntire", "For My Broken Heart", "Country"),
        ],
    },
    GENERAL: {
        "joy": [
            (81, "Happy", "Pharrell Williams", "Girl", "Pop"),
            (82, "Can't Stop the Feeling!", "Justin Timberlake", "Trolls Soundtrack", "Pop"),
            (83, "Good as Hell", "Lizzo", "Cuz I Love You", "Pop"),
            (84, "Uptown Funk", "Mark Ronson ft. Bruno Mars", "Uptown Special", "Funk"),
            (85, "Walking on Sunshine", "Katrina and the Waves", "Walking on Sunshine", "Rock"),
            (86, "I Gotta Feeling", "The Black Eyed Peas", "The E.N.D.", "Hip-Hop"),
            (87, "Don't Stop Me Now", "Queen", "Jazz", "Rock"),
            (88, "September", "Earth, Wind & Fire", "The Best of Earth, Wind & Fire", "R&B"),
            (89, "Good Vibrations", "The Beach Boys", "Smiley Smile", "Rock"),
            (90, "Three Little Birds", "Bob Marley", "Exodus", "Reggae"),
        ],
        "sadness": [
            (91, "Someone Like You", "Adele", "21", "Pop"),
            (92, "Mad World", "Gary Jules", "Trading Snakeoil for Wolftickets", "Alternative"),
            (93, "The Sound of Silence", "Simon & Garfunkel", "Sounds of Silence", "Folk"),
            (94, "Everybody Hurts", "R.E.M.", "Automatic for the People", "Alternative"),
            (95, "Hallelujah", "Jeff Buckley", "Grace", "Alternative"),
            (96, "Black", "Pearl Jam", "Ten", "Grunge"),
            (97, "Creep", "Radiohead", "Pablo Honey", "Alternative"),
            (98, "Hurt", "Nine Inch Nails", "The Downward Spiral", "Industrial"),
            (99, "Skinny Love", "Bon Iver", "For Emma, Forever Ago", "Indie Folk"),
            (100, "The Night We Met", "Lord Huron", "Strange Trails", "Indie Folk"),
        ],
        "anger": [
            (101, "Break Stuff", "Limp Bizkit", "Significant Other", "Nu Metal"),
            (102, "Bodies", "Drowning Pool", "Sinner", "Nu Metal"),
            (103, "Chop Suey!", "System of a Down", "Toxicity", "Metal"),
            (104, "B.Y.O.B.", "System of a Down", "Mezmerize", "Metal"),
            (105, "Killing in the Name", "Rage Against the Machine", "Rage Against the Machine", "Rap Metal"),
            (106, "Freak on a Leash", "Korn", "Follow the Leader", "Nu Metal"),
            (107, "Stronger", "Kanye West", "Graduation", "Hip-Hop"),
            (108, "Till I Collapse", "Eminem", "The Eminem Show", "Hip-Hop"),
            (109, "Lose Yourself", "Eminem", "8 Mile Soundtrack", "Hip-Hop"),
            (110, "Pump It", "The Black Eyed Peas", "Monkey Business", "Hip-Hop"),
        ],
        "fear": [
            (111, "Mad World", "Tears for Fears", "The Hurting", "New Wave"),
            (112, "Breathe Me", "Sia", "Colour the Small One", "Pop"),
            (113, "Heavy", "Linkin Park ft. Kiiara", "One More Light", "Alternative"),
            (114, "Numb", "Linkin Park", "Meteora", "Nu Metal"),
            (115, "In the End", "Linkin Park", "Hybrid Theory", "Nu Metal"),
            (116, "Crawling", "Linkin Park", "Hybrid Theory", "Nu Metal"),
            (117, "Anxiety", "Julia Michaels ft. Selena Gomez", "Single", "Pop"),
            (118, "Stressed Out", "Twenty One Pilots", "Blurryface", "Alternative"),
            (119, "Heathens", "Twenty One Pilots", "Suicide Squad Soundtrack", "Alternative"),
            (120, "Car Radio", "Twenty One Pilots", "Vessel", "Alternative"),
        ],
    },
}


def _to_track(row: Row) -> TrackRecommendation:
    track_id, title, artist, album, genre = row
    return TrackRecommendation(
        id=f"mock-{track_id}",
        title=title,
        artist=artist,
        album=album,
        genre=genre,
        source="mock",
    )


def mock_tracks(emotion: str, variant: str = GENERAL, limit: int = 5) -> List[TrackRecommendation]:
    """Nunca devuelve lista vacía: variante o emoción desconocidas caen a general/joy."""
    table = MOCK_CATALOG.get(variant) or MOCK_CATALOG[GENERAL]
    rows = table.get(emotion) or table[DEFAULT_EMOTION]
    return [_to_track(row) for row in rows[: max(1, limit)]]
