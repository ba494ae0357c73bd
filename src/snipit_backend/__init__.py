"""Desktop backend commands for driving a local language-model runner."""
