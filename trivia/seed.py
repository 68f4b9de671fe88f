import json

from trivia import db
from trivia.models import Category, Question

SEED_DATA = [
    {
        'category': 'Science',
        'questions': [
            ('What is the chemical symbol for gold?', ['Ag', 'Au', 'Fe', 'Cu'], 1),
            ('What planet is known as the Red Planet?', ['Venus', 'Jupiter', 'Mars', 'Saturn'], 2),
            ('What is the powerhouse of the cell?', ['Nucleus', 'Ribosome', 'Mitochondria', 'Golgi apparatus'], 2),
            ('What gas do plants absorb from the atmosphere?', ['Oxygen', 'Nitrogen', 'Carbon dioxide', 'Hydrogen'], 2),
            ('What is the speed of light in a vacuum (approx)?',
             ['300,000 km/s', '150,000 km/s', '1,000,000 km/s', '30,000 km/s'], 0),
        ],
    },
    {
        'category': 'History',
        'questions': [
            ('In what year did World War II end?', ['1943', '1944', '1945', '1946'], 2),
            ('Who was the first President of the United States?',
             ['John Adams', 'Thomas Jefferson', 'George Washington', 'Benjamin Franklin'], 2),
            ('The Great Wall of China was primarily built to protect against whom?',
             ['Japanese', 'Mongols', 'Koreans', 'Russians'], 1),
            ('Which empire was ruled by Genghis Khan?',
             ['Ottoman Empire', 'Roman Empire', 'Mongol Empire', 'Persian Empire'], 2),
            ('In what year did the Titanic sink?', ['1905', '1912', '1918', '1920'], 1),
        ],
    },
    {
        'category': 'Geography',
        'questions': [
            ('What is the largest continent by area?', ['Africa', 'North America', 'Europe', 'Asia'], 3),
            ('Which country has the most natural lakes?', ['USA', 'Canada', 'Russia', 'Brazil'], 1),
            ('What is the longest river in the world?', ['Amazon', 'Nile', 'Yangtze', 'Mississippi'], 1),
            ('What is the smallest country in the world?', ['Monaco', 'Vatican City', 'San Marino', 'Liechtenstein'], 1),
            ('Mount Everest is located on the border of which two countries?',
             ['India and China', 'Nepal and China', 'Nepal and India', 'China and Pakistan'], 1),
        ],
    },
    {
        'category': 'Entertainment',
        'questions': [
            ('Who directed the movie Inception?',
             ['Steven Spielberg', 'Christopher Nolan', 'Martin Scorsese', 'James Cameron'], 1),
            ('What is the highest-grossing film of all time (not adjusted for inflation)?',
             ['Avengers: Endgame', 'Avatar', 'Titanic', 'Star Wars: The Force Awakens'], 1),
            ("Which band released the album 'Abbey Road'?",
             ['The Rolling Stones', 'The Beatles', 'Led Zeppelin', 'Pink Floyd'], 1),
            ("In the TV show Breaking Bad, what is Walter White's alias?",
             ['Heisenberg', 'The Professor', 'Scarface', 'The Chemist'], 0),
            ('What year was the first Harry Potter book published?', ['1995', '1997', '1999', '2001'], 1),
        ],
    },
    {
        'category': 'Technology',
        'questions': [
            ('Who co-founded Apple Computer with Steve Jobs?',
             ['Bill Gates', 'Steve Wozniak', 'Paul Allen', 'Larry Ellison'], 1),
            ('What does HTTP stand for?',
             ['HyperText Transfer Protocol', 'High Tech Transfer Protocol',
              'HyperText Transmission Process', 'High Transfer Text Protocol'], 0),
            ('In what year was the World Wide Web invented?', ['1985', '1989', '1993', '1995'], 1),
            ('What programming language was created by Brendan Eich in 10 days?',
             ['Java', 'Python', 'JavaScript', 'Ruby'], 2),
            ('What does CPU stand for?',
             ['Central Processing Unit', 'Computer Personal Unit', 'Central Program Utility', 'Core Processing Unit'], 0),
        ],
    },
]


def seed_questions(data=SEED_DATA):
    """Insert categories and their questions, skipping categories that exist.

    Yields ``(category_name, questions_created)`` per category.
    """
    for entry in data:
        name = entry['category']
        if Category.query.filter_by(name=name).first():
            yield name, 0
            continue
        category = Category(name=name)
        db.session.add(category)
        db.session.flush()
        for text, options, correct_index in entry['questions']:
            db.session.add(Question(
                category_id=category.id,
                question_text=text,
                options=json.dumps(options),
                correct_index=correct_index,
            ))
        db.session.commit()
        yield name, len(entry['questions'])
