import pytest

from patternkit.copier import (
    Data,
    EndOfData,
    Pillar,
    System,
    Xenia,
    copy,
    main,
    pull,
    store,
)


class ScriptedRng:
    def __init__(self, values):
        self._values = iter(values)

    def randrange(self, stop):
        return next(self._values)


class CountingPuller:
    def __init__(self, available, error=None):
        self.available = available
        self.error = error if error is not None else EndOfData()

    def pull(self, data):
        if self.available == 0:
            raise self.error
        self.available -= 1
        data.line = f"row{self.available}"


class RecordingStorer:
    def __init__(self):
        self.lines = []

    def store(self, data):
        self.lines.append(data.line)


class FailingStorer:
    def store(self, data):
        raise OSError("disk full")


def test_xenia_fills_record(capsys):
    data = Data()
    Xenia(ScriptedRng([0])).pull(data)
    assert data.line == "Data"
    assert capsys.readouterr().out == "In: Data\n"


@pytest.mark.parametrize("roll", [1, 9])
def test_xenia_end_of_data(roll):
    with pytest.raises(EndOfData):
        Xenia(ScriptedRng([roll])).pull(Data())


def test_xenia_read_error():
    with pytest.raises(RuntimeError, match="Error reading data from Xenia"):
        Xenia(ScriptedRng([5])).pull(Data())


def test_pillar_prints(capsys):
    Pillar().store(Data("Data"))
    assert capsys.readouterr().out == "Out: Data\n"


def test_pull_fills_whole_batch():
    data = [Data() for _ in range(3)]
    assert pull(CountingPuller(5), data) == 3
    assert all(item.line for item in data)


def test_pull_reports_partial_count():
    data = [Data() for _ in range(4)]
    with pytest.raises(EndOfData) as info:
        pull(CountingPuller(2), data)
    assert info.value.pulled == 2


def test_store_returns_count():
    storer = RecordingStorer()
    assert store(storer, [Data("a"), Data("b")]) == 2
    assert storer.lines == ["a", "b"]


def test_copy_moves_everything():
    storer = RecordingStorer()
    total = copy(System(puller=CountingPuller(7), storer=storer), 3)
    assert total == 7
    assert len(storer.lines) == 7
    assert len(set(storer.lines)) == 7


def test_copy_with_xenia_and_pillar(capsys):
    system = System(puller=Xenia(ScriptedRng([0, 2, 3, 4, 1])), storer=Pillar())
    assert copy(system, 3) == 4
    lines = capsys.readouterr().out.splitlines()
    assert lines.count("In: Data") == 4
    assert lines.count("Out: Data") == 4


def test_copy_stores_before_raising(capsys):
    system = System(puller=Xenia(ScriptedRng([0, 5])), storer=Pillar())
    with pytest.raises(RuntimeError, match="Error reading data from Xenia"):
        copy(system, 3)
    assert capsys.readouterr().out.splitlines() == ["In: Data", "Out: Data"]


def test_copy_propagates_puller_error():
    storer = RecordingStorer()
    system = System(puller=CountingPuller(2, ValueError("bad")), storer=storer)
    with pytest.raises(ValueError, match="bad"):
        copy(system, 5)
    assert len(storer.lines) == 2


def test_copy_propagates_storer_error():
    system = System(puller=CountingPuller(3), storer=FailingStorer())
    with pytest.raises(OSError, match="disk full"):
        copy(system, 2)


@pytest.mark.parametrize("batch", [0, -1])
def test_copy_rejects_bad_batch(batch):
    with pytest.raises(ValueError):
        copy(System(puller=CountingPuller(1), storer=RecordingStorer()), batch)


@pytest.mark.parametrize("seed", range(6))
def test_main_stores_everything_it_pulls(seed, capsys):
    code = main(["--seed", str(seed)])
    lines = capsys.readouterr().out.splitlines()
    assert lines.count("In: Data") == lines.count("Out: Data")
    failed = "Error reading data from Xenia" in lines
    assert code == (1 if failed else 0)