from villagesim.bulletin import BulletinBoard, BulletinBoardPool
from villagesim.pathfinding import Pathfinder
from villagesim.resources import Quest, ResourceType


def test_empty_board_gives_empty_quest_without_notifying():
    board = BulletinBoard((0.0, 0.0, 0.0))
    obtained = []
    board.on_quest_obtained.connect(obtained.append)
    quest = board.get_quest()
    assert quest == Quest()
    assert quest.is_empty
    assert obtained == []


def test_add_quest_stores_and_announces():
    board = BulletinBoard((0.0, 0.0, 0.0))
    calls = []
    board.on_quest_available.connect(lambda: calls.append(True))
    board.add_quest(Quest(ResourceType.WOOD, 15))
    assert board.quests == [Quest(ResourceType.WOOD, 15)]
    assert calls == [True]


def test_get_quest_hands_out_largest_first():
    board = BulletinBoard((0.0, 0.0, 0.0))
    small = Quest(ResourceType.WATER, 5)
    large = Quest(ResourceType.BERRIES, 15)
    medium = Quest(ResourceType.WOOD, 10)
    for quest in (small, large, medium):
        board.add_quest(quest)
    assert [board.get_quest() for _ in range(3)] == [large, medium, small]
    assert board.quests == []


def test_get_quest_announces_the_quest_taken():
    board = BulletinBoard((0.0, 0.0, 0.0))
    obtained = []
    board.on_quest_obtained.connect(obtained.append)
    quest = Quest(ResourceType.WATER, 15)
    board.add_quest(quest)
    assert board.get_quest() == quest
    assert obtained == [quest]


def test_board_keeps_its_location():
    board = BulletinBoard((1.0, 2.0, 3.0))
    assert board.location == (1.0, 2.0, 3.0)
    assert board.grid_position is None


def test_pool_adds_boards_and_links_nodes():
    pathfinder = Pathfinder({}, 250)
    pool = BulletinBoardPool(pathfinder)
    first = BulletinBoard((50.0, 60.0, 0.0))
    second = BulletinBoard((150.0, 60.0, 0.0))
    pool.add_from_scene([first, None, second])
    assert pool.boards == [first, second]
    assert pool.count == 2
    assert len(pool) == 2
    assert first.grid_position == (50, 60)
    assert second.grid_position == (150, 60)
    assert pathfinder.node_map[(50, 60)] in pathfinder.node_map[(150, 60)].neighbors


def test_pool_announces_after_boards_are_added():
    pool = BulletinBoardPool(Pathfinder({}, 250))
    seen = []
    pool.on_initialized.connect(lambda: seen.append(len(pool)))
    boards = [BulletinBoard((0.0, 0.0, 0.0)), BulletinBoard((1000.0, 0.0, 0.0))]
    pool.add_from_scene(boards)
    assert seen == [len(boards)]
    assert list(pool) == boards