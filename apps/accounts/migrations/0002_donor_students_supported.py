# Generated manually: students app depends on donors, so the link is added afterwards

from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('accounts', '0001_initial'),
        ('students', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='donor',
            name='students_supported',
            field=models.ManyToManyField(blank=True, related_name='supporters', to='students.student'),
        ),
    ]
