# axiom

Building blocks for a filter that sits between a command and whoever reads its
output — a person or a language-model agent. The package splits raw terminal
output into lines, separates progress-bar updates from real output, strips
ANSI escape codes, turns space-aligned tables into Markdown rows, applies
per-tool rules, redacts secrets and personal data, keeps the raw output of the
last run, and records how many bytes were saved.

## Modules

- `axiom.events` — `StreamPipeline.process(chunk)` takes a chunk of bytes and
  returns `TerminalEvent` values. A line ended by `\n` becomes an
  `EventKind.STATIC_LINE`; text ended by `\r` becomes an
  `EventKind.PROGRESS_UPDATE`. ANSI escape codes are removed first. Text not yet
  ended by either character stays buffered for the next chunk.
  `EventKind.STREAM_END` is available for callers to mark the end of a stream.
- `axiom.privacy` — `PrivacyRedactor(entropy_threshold, pii_patterns, entropy)`
  replaces known credential formats with `[REDACTED_SECRET]` and matches of
  the given PII regular expressions with `[REDACTED_PII]` (patterns that do not
  compile are ignored). If an `entropy` function is given, words longer than
  15 characters whose score exceeds the threshold are also replaced, except
  40- or 64-character hexadecimal strings. `PrivacyRedactor.with_defaults()`
  uses a threshold of 4.5 with e-mail and IPv4 patterns.
  `EnterpriseRedactor.contextual_redact(text)` returns the text unchanged, or
  applies its `fallback` redactor when one is set.
- `axiom.intent` — `IntentContext(last_message, command, keywords)` and
  `is_relevant(text)`, which is true when a keyword appears in both the
  message and the text, or a word of the message longer than three bytes
  appears in the text (case-insensitive).
- `axiom.schema` — `ToolSchema`, `TransformationRule` and `Action` describe
  per-tool rules. `load_schemas(directory)` reads and compiles every `*.yaml`
  file in a directory, skipping files it cannot read or parse, and raising
  `SchemaError` for an invalid regular expression.
- `axiom.transformer` — `looks_like_table(line)`, `to_markdown(line)` and
  `should_guard(command, line_count, context)`, which is true for `cat`
  commands past line 100 unless the intent asks for the full file.
- `axiom.render` — `TtyRenderer` writes lines and `[AXIOM]` summaries to
  standard output or standard error; a broken pipe exits quietly.
- `axiom.persistence` — `PersistenceManager(db_path)` keeps global settings
  (enabled flag, bypass count), per-session intelligence modes, learned
  templates and a savings log in SQLite. It is also a context manager.
  Database failures raise `axiom.errors.DatabaseError`.
- `axiom.analytics` — `TokenSavings`, a savings record with
  `savings_percentage()`.
- `axiom.reporting` — `EfficiencyReport.from_history(rows)` totals
  `(command, original, compressed)` rows overall and per tool (`git`, `docker`,
  `npm`, `cargo`, `k8s`, `tf`, `other`); `render_dashboard(report, stream)`
  prints the savings dashboard.
- `axiom.storage` — `LogManager(path)` appends raw lines to a log (by default
  `$HOME/.axiom/logs/last_run.log`), resets it, and returns the last lines
  with optional case-insensitive `grep` and `tail` filters.
- `axiom.process` — `sanitized_path(env)` drops `.axiom/bin` entries from
  `PATH`; `spawn_child(program, args)` starts a command with that `PATH` and
  piped standard output and error.
- `axiom.detective` — `is_called_by_ai()` checks the current process and up to
  three ancestors for known agent names; `parent_name()` names the parent.
- `axiom.traces` and `axiom.laboratory` — `LineTrace` and `TraceEvent` record
  per-line decisions; `render_trace_report(traces, stream)` prints them as a
  table (the first and last 50 rows when there are more than 100), and
  `render_session_savings(raw_bytes, saved_bytes, stream)` prints a footer
  when more than 500 bytes were processed.
- `axiom.errors` — `AxiomError` and its subclasses `DatabaseError`,
  `SchemaError` and `ConfigError`.

## Example

```python
import sys

from axiom.events import EventKind, StreamPipeline
from axiom.persistence import PersistenceManager
from axiom.privacy import PrivacyRedactor
from axiom.reporting import EfficiencyReport, render_dashboard

pipeline = StreamPipeline()
redactor = PrivacyRedactor.with_defaults()

for event in pipeline.process(b"downloading 10%\rdone\ncontact admin@example.com\n"):
    if event.kind is EventKind.STATIC_LINE:
        print(redactor.redact(event.text))

with PersistenceManager("axiom.db") as store:
    store.log_saving("git status", 1000, 200)
    report = EfficiencyReport.from_history(store.get_recent_history(10000))
    render_dashboard(report, sys.stdout)
```

## Tool schemas

A schema is a YAML document naming the tool, a regular expression searched
in the command line, and rules. Each rule has a name, a pattern, a priority
and one of the actions `keep`, `collapse`, `redact`, `hidden` or
`synthesize`. `apply_rules(line)` returns the action of the matching rule
with the highest priority; among equal priorities the last one wins.

```yaml
name: git
command_pattern: "^git"
rules:
  - name: hide-hints
    pattern: "^hint:"
    action: hidden
    priority: 10
```

## What this package does not do

It provides the pieces, not a finished tool. There is no command-line
program, no engine that runs output lines through every stage in turn, no
deduplication or pattern-learning of noisy lines, no loading of a
configuration file, no keyword or embedding relevance model beyond
`IntentContext.is_relevant`, no plugin runtime, no installer or shell
integration, no self-update, and no telemetry. The entropy check of
`PrivacyRedactor` runs only with an entropy function supplied by the caller.

## Tests

The test suite uses pytest; install the `test` extra to get it.