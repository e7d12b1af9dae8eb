# patternkit

A collection of small, self-contained building blocks for concurrent and
data-handling programs. Each module is usable as a library and also comes
with a command that shows it at work. The package needs nothing beyond the
Python standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                 | Purpose                                                                  |
|------------------------|--------------------------------------------------------------------------|
| `patternkit.words`     | Count the whitespace-separated words in a text                           |
| `patternkit.pool`      | A bounded pool of reusable, closable resources                           |
| `patternkit.work`      | A fixed set of worker threads that run submitted tasks                   |
| `patternkit.runner`    | Run a list of tasks within a time limit, stoppable by an interrupt       |
| `patternkit.engines`   | Fan a query out to several simulated searchers, keeping all or the first answer |
| `patternkit.semaphore` | A counting semaphore and a many-readers, one-writer lock built on it     |
| `patternkit.feeds`     | Feed descriptions, a matcher registry and concurrent matching            |
| `patternkit.rss`       | RSS document parsing and a matcher that searches RSS feeds               |
| `patternkit.handlers`  | A tiny HTTP service that answers with a JSON document                    |
| `patternkit.copier`    | Batch copying from a puller into a storer                                |
| `patternkit.contacts`  | Decoding and encoding a contact as JSON                                  |
| `patternkit.logs`      | Four levelled loggers writing to nowhere, stdout, stderr and a file      |
| `patternkit.tennis`    | Players passing a ball between threads until one misses                  |
| `patternkit.relay`     | Runner threads handing a baton to each other                             |
| `patternkit.tasks`     | A fixed number of workers draining a queue of tasks                      |
| `patternkit.counters`  | A counter that stays correct under concurrent increments                 |
| `patternkit.primes`    | Prime numbers below a limit, found by several threads at once            |

## Library use

Counting words:

```python
from patternkit.words import count_words

count_words("the quick  brown\tfox")   # 4
```

Sharing resources through a pool:

```python
from patternkit.pool import Pool, PoolClosedError

pool = Pool(make_connection, 2)
conn = pool.acquire()
try:
    ...
finally:
    pool.release(conn)
pool.close()
```

`Pool(factory, size)` raises `ValueError` when `size` is not positive.
`acquire()` hands out a pooled resource if one is free and calls the factory
otherwise. A released resource goes back into the pool while there is room
and is closed otherwise. After `close()`, every pooled resource is closed,
resources released later are closed straight away, and `acquire()` raises
`PoolClosedError`. A pool also works as a context manager that closes it.

Running tasks on a fixed set of workers:

```python
from patternkit.work import WorkPool

workers = WorkPool(2)
workers.run(job)        # job has a task() method; returns once a thread took it
workers.shutdown()      # waits until all submitted work is done
```

Submitting to, or shutting down, a pool that is already shut down raises
`RuntimeError`.

Running tasks under a time limit:

```python
from patternkit.runner import Runner, RunnerTimeout, RunnerInterrupted, create_task

runner = Runner(3.0)
runner.add(create_task(1.0), create_task(1.0), create_task(1.0))
try:
    runner.start()
except RunnerTimeout:
    ...
except RunnerInterrupted:
    ...
```

The time limit counts from the moment the runner is built. Every task receives
its position in the list as its id. Calling `runner.interrupt()`, or pressing
Ctrl-C while `start()` runs in the main thread, stops the run before the next
task begins.

Fanning out a search:

```python
from patternkit.engines import submit, google, bing, yahoo, only_first

everything = submit("language", google, bing, yahoo)
fastest = submit("language", only_first, google, bing, yahoo)
```

The searchers are simulated: each pauses for a random moment and answers
with one fixed `Result`.

Readers and writers:

```python
from patternkit.semaphore import Semaphore, ReaderWriter, start, shutdown

first = start("First", 3, 6)
second = start("Second", 2, 2)
...
shutdown(first, second)
```

`Semaphore(capacity)` offers `acquire(count)` and `release(count)`; a
`ReaderWriter` offers `read_lock`, `read_unlock`, `write_lock`,
`write_unlock` and `stop`.

Copying in batches:

```python
from patternkit.copier import System, Xenia, Pillar, copy

copied = copy(System(Xenia(), Pillar()), 3)
```

`copy` stops normally when the puller raises `EndOfData`; any other failure
is raised after the records pulled before it have been stored.

Contacts as JSON:

```python
from patternkit.contacts import decode_contact, encode_contact

contact = decode_contact(text)
text_again = encode_contact(contact)
```

Feeds and matchers:

```python
from patternkit.feeds import register, retrieve_feeds, run
from patternkit.rss import RssMatcher, parse_rss

document = parse_rss(xml_bytes)
results = run("president", "feeds.json")
```

The feed file is a JSON array of objects with `site`, `link` and `type`
keys. Register a matcher for a feed type with `register`; registering the same
type twice raises `MatcherAlreadyRegistered`. Importing `patternkit.rss`
registers the RSS matcher for the type `rss`. Feeds whose type has no
registered matcher are handled by the default matcher, which finds nothing.

## Commands

Each module with a demonstration has a command:

```
patternkit-wordcount FILE
patternkit-pool [--queries N] [--resources N] [--max-delay SECONDS]
patternkit-work [--workers N] [--rounds N] [--delay SECONDS]
patternkit-runner [--timeout SECONDS] [--task-seconds SECONDS]
patternkit-engines [QUERY]
patternkit-semaphore [--seconds SECONDS]
patternkit-rss [TERM] [--data FILE]
patternkit-serve [--host HOST] [--port PORT]
patternkit-copy [--batch N] [--seed N]
patternkit-contacts [FILE]
patternkit-logs [--error-log FILE]
patternkit-tennis [NAME ...] [--seed N]
patternkit-relay [--runners N] [--leg-time SECONDS]
patternkit-tasks [--workers N] [--tasks N] [--max-sleep SECONDS]
patternkit-counters [--workers N] [--rounds N]
patternkit-primes [PREFIX ...] [--limit N]
```

`patternkit-wordcount` reports how many words the given file holds.
`patternkit-serve` starts the JSON service on port 4000 by default; a
`GET /sendjson` request answers with a document holding a `Name` and an
`Email`, and any other path answers 404. `patternkit-runner` exits with 1 on
timeout and 2 on interrupt.

## What it does not do

- No feed list is shipped. `patternkit-rss` reads `data/data.json` from the
  current directory unless `--data` names another file, and it fetches the
  feeds over the network.
- The search engines in `patternkit.engines` do not contact any real service.
- The web service has a single fixed endpoint; it stores nothing and serves
  no files.