"""
seed_data.py — Default plants and UK seed calendar loaded on first start.

Plant relationships are listed by NAME; plant_database resolves them to
ids when seeding (exact name first, then substring match).
"""

DEFAULT_PLANTS = [
    # Vegetables
    {'name': 'Tomato', 'scientific_name': 'Solanum lycopersicum',
     'companions': ['Basil', 'Marigold', 'Nasturtium', 'Carrot', 'Onion'],
     'antagonists': ['Potato', 'Fennel', 'Corn', 'Kohlrabi'],
     'benefits': ['Improves flavor', 'Repels aphids']},
    {'name': 'Carrot', 'scientific_name': 'Daucus carota',
     'companions': ['Tomato', 'Onion', 'Leek', 'Rosemary', 'Sage'],
     'antagonists': ['Dill', 'Parsnip'],
     'benefits': ['Loosens soil']},
    {'name': 'Cucumber', 'scientific_name': 'Cucumis sativus',
     'companions': ['Sunflower', 'Nasturtium', 'Corn', 'Beans', 'Peas'],
     'antagonists': ['Potato', 'Sage'],
     'benefits': ['Ground cover keeps soil moist']},
    {'name': 'Lettuce', 'scientific_name': 'Lactuca sativa',
     'companions': ['Carrot', 'Radish', 'Strawberry', 'Cucumber'],
     'antagonists': [],
     'benefits': ['Shades soil for neighbours']},
    {'name': 'Spinach', 'scientific_name': 'Spinacia oleracea',
     'companions': ['Strawberry', 'Peas'],
     'antagonists': [],
     'benefits': []},
    {'name': 'Potato', 'scientific_name': 'Solanum tuberosum',
     'companions': ['Beans', 'Corn', 'Cabbage'],
     'antagonists': ['Tomato', 'Cucumber', 'Sunflower'],
     'benefits': []},
    {'name': 'Bell Pepper', 'scientific_name': 'Capsicum annuum',
     'companions': ['Basil', 'Onion', 'Carrot'],
     'antagonists': ['Fennel', 'Kohlrabi'],
     'benefits': []},
    {'name': 'Peas', 'scientific_name': 'Pisum sativum',
     'companions': ['Carrot', 'Cucumber', 'Corn', 'Beans'],
     'antagonists': ['Onion', 'Garlic'],
     'benefits': ['Fixes nitrogen in the soil']},
    {'name': 'Radish', 'scientific_name': 'Raphanus sativus',
     'companions': ['Peas', 'Nasturtium', 'Lettuce', 'Cucumber'],
     'antagonists': [],
     'benefits': ['Deters cucumber beetles']},
    {'name': 'Onion', 'scientific_name': 'Allium cepa',
     'companions': ['Carrot', 'Tomato', 'Chamomile'],
     'antagonists': ['Beans', 'Peas'],
     'benefits': ['Deters carrot fly']},
    {'name': 'Garlic', 'scientific_name': 'Allium sativum',
     'companions': ['Tomato'],
     'antagonists': ['Beans', 'Peas'],
     'benefits': ['Repels aphids']},
    {'name': 'Cabbage', 'scientific_name': 'Brassica oleracea var. capitata',
     'companions': ['Onion', 'Rosemary', 'Sage', 'Thyme'],
     'antagonists': ['Strawberry', 'Tomato'],
     'benefits': []},
    {'name': 'Beans', 'scientific_name': 'Phaseolus vulgaris',
     'companions': ['Corn', 'Cucumber', 'Potato', 'Strawberry'],
     'antagonists': ['Onion', 'Garlic', 'Fennel'],
     'benefits': ['Fixes nitrogen in the soil']},
    {'name': 'Corn', 'scientific_name': 'Zea mays',
     'companions': ['Beans', 'Cucumber', 'Squash'],
     'antagonists': ['Tomato'],
     'benefits': ['Provides support for climbers']},
    {'name': 'Squash', 'scientific_name': 'Cucurbita maxima',
     'companions': ['Corn', 'Beans', 'Nasturtium'],
     'antagonists': ['Potato'],
     'benefits': ['Suppresses weeds']},
    {'name': 'Strawberry', 'scientific_name': 'Fragaria × ananassa',
     'companions': ['Lettuce', 'Spinach', 'Borage'],
     'antagonists': ['Cabbage'],
     'benefits': []},
    # Herbs
    {'name': 'Basil', 'scientific_name': 'Ocimum basilicum',
     'companions': ['Tomato', 'Bell Pepper'],
     'antagonists': [],
     'benefits': ['Improves flavor', 'Repels flies and mosquitoes']},
    {'name': 'Dill', 'scientific_name': 'Anethum graveolens',
     'companions': ['Cabbage', 'Cucumber', 'Lettuce'],
     'antagonists': ['Carrot', 'Tomato'],
     'benefits': ['Attracts beneficial insects']},
    {'name': 'Rosemary', 'scientific_name': 'Salvia rosmarinus',
     'companions': ['Cabbage', 'Beans', 'Carrot', 'Sage'],
     'antagonists': [],
     'benefits': ['Deters cabbage moth']},
    {'name': 'Sage', 'scientific_name': 'Salvia officinalis',
     'companions': ['Rosemary', 'Cabbage', 'Carrot'],
     'antagonists': ['Cucumber'],
     'benefits': ['Deters cabbage moth']},
    {'name': 'Thyme', 'scientific_name': 'Thymus vulgaris',
     'companions': ['Cabbage', 'Tomato'],
     'antagonists': [],
     'benefits': ['Repels cabbage worms']},
    {'name': 'Fennel', 'scientific_name': 'Foeniculum vulgare',
     'companions': ['Dill'],
     'antagonists': ['Tomato', 'Beans'],
     'benefits': []},
    # Flowers
    {'name': 'Marigold', 'scientific_name': 'Tagetes',
     'companions': ['Tomato'],
     'antagonists': [],
     'benefits': ['Repels nematodes']},
    {'name': 'Nasturtium', 'scientific_name': 'Tropaeolum',
     'companions': ['Cucumber', 'Squash', 'Tomato'],
     'antagonists': [],
     'benefits': ['Trap crop for aphids']},
    {'name': 'Sunflower', 'scientific_name': 'Helianthus annuus',
     'companions': ['Cucumber', 'Corn'],
     'antagonists': ['Potato', 'Beans'],
     'benefits': ['Attracts pollinators']},
    {'name': 'Borage', 'scientific_name': 'Borago officinalis',
     'companions': ['Tomato', 'Squash', 'Strawberry'],
     'antagonists': [],
     'benefits': ['Attracts pollinators']},
    {'name': 'Chamomile', 'scientific_name': 'Matricaria chamomilla',
     'companions': ['Cabbage', 'Onion', 'Cucumber'],
     'antagonists': [],
     'benefits': ['Attracts beneficial insects']},
]


DEFAULT_SEED_CALENDAR = [
    {'vegetable': 'Beetroot', 'sow_indoors': ['Feb-Mar'], 'sow_outdoors': ['Apr-Jul'],
     'transplant_outdoors': ['Apr'], 'harvest_period': ['Jun-Oct']},
    {'vegetable': 'Broad Beans', 'sow_indoors': ['Feb'], 'sow_outdoors': ['Mar-Apr', 'Oct-Nov'],
     'transplant_outdoors': ['Apr'], 'harvest_period': ['Jun-Aug']},
    {'vegetable': 'Broccoli', 'sow_indoors': ['Mar-May'], 'sow_outdoors': ['Apr-May'],
     'transplant_outdoors': ['Jun-Jul'], 'harvest_period': ['Jul-Oct']},
    {'vegetable': 'Brussels Sprouts', 'sow_indoors': ['Feb-Mar'], 'sow_outdoors': ['Mar-Apr'],
     'transplant_outdoors': ['May-Jun'], 'harvest_period': ['Oct-Feb']},
    {'vegetable': 'Cabbage', 'sow_indoors': ['Mar-May'], 'sow_outdoors': ['Apr-May'],
     'transplant_outdoors': ['May-Jul'], 'harvest_period': ['Aug-Nov']},
    {'vegetable': 'Carrots', 'sow_indoors': [], 'sow_outdoors': ['Mar-Jul'],
     'transplant_outdoors': [], 'harvest_period': ['Jun-Nov']},
    {'vegetable': 'Courgettes', 'sow_indoors': ['Apr-May'], 'sow_outdoors': ['May-Jun'],
     'transplant_outdoors': ['Jun'], 'harvest_period': ['Jul-Oct']},
    {'vegetable': 'Garlic', 'sow_indoors': [], 'sow_outdoors': ['Oct-Dec', 'Feb-Mar'],
     'transplant_outdoors': [], 'harvest_period': ['Jun-Aug']},
    {'vegetable': 'Kale', 'sow_indoors': ['Mar-Apr'], 'sow_outdoors': ['Apr-Jun'],
     'transplant_outdoors': ['Jun-Jul'], 'harvest_period': ['Sep-Mar']},
    {'vegetable': 'Leeks', 'sow_indoors': ['Jan-Mar'], 'sow_outdoors': ['Mar-Apr'],
     'transplant_outdoors': ['Jun-Jul'], 'harvest_period': ['Sep-Apr']},
    {'vegetable': 'Lettuce', 'sow_indoors': ['Jan-Aug'], 'sow_outdoors': ['Mar-Aug'],
     'transplant_outdoors': ['Apr-Sep'], 'harvest_period': ['May-Oct']},
    {'vegetable': 'Onions', 'sow_indoors': ['Jan-Feb'], 'sow_outdoors': ['Mar-Apr'],
     'transplant_outdoors': ['Apr'], 'harvest_period': ['Jul-Sep']},
    {'vegetable': 'Parsnips', 'sow_indoors': [], 'sow_outdoors': ['Mar-May'],
     'transplant_outdoors': [], 'harvest_period': ['Oct-Feb']},
    {'vegetable': 'Peas', 'sow_indoors': ['Feb-Mar'], 'sow_outdoors': ['Mar-Jun'],
     'transplant_outdoors': ['Apr-May'], 'harvest_period': ['Jun-Sep']},
    {'vegetable': 'Potatoes', 'sow_indoors': [], 'sow_outdoors': ['Mar-May'],
     'transplant_outdoors': [], 'harvest_period': ['Jun-Oct']},
    {'vegetable': 'Spinach', 'sow_indoors': [], 'sow_outdoors': ['Mar-Sep'],
     'transplant_outdoors': [], 'harvest_period': ['May-Nov']},
    {'vegetable': 'Tomatoes', 'sow_indoors': ['Feb-Mar'], 'sow_outdoors': [],
     'transplant_outdoors': ['May-Jun'], 'harvest_period': ['Jul-Oct']},
]
