from audio_intelligence.l4_frameworks_and_drivers.cli import cli

if __name__ == '__main__':
    cli()
